"""Hierarchical labels for rows and columns.

Every row of a Series or DataFrame is identified by its labels
in the :class:`Index`, every column of a DataFrame by its labels
in the :class:`Columns`.

Both are made of one or more levels, all of the same length.
A multi level index provides multiple labels for each row,
for example the city and the shop of a row::

    city         shop
    New York     Shop A    10
                 Shop B    15
    Los Angeles  Shop C     8

Each level keeps a map from its labels to their positions,
that map must always reflect the labels, so any code
that modifies the labels must refresh the level afterwards.
"""

from .columns import ColLevel, Columns
from .index import Index
from .level import LabelMap, Level

__all__ = ("Level", "Index", "ColLevel", "Columns", "LabelMap")
