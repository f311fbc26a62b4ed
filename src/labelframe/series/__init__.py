"""Labeled one dimensional data.

A :class:`Series` is a column of values of a single kind,
where each row is identified by the labels of its index.

Series can be selected, sorted, modified and aggregated::

    >>> from labelframe import Config, Series
    >>> s = Series([3.0, None, 1.0], Config(index=["x", "y", "z"], name="temps"))
    >>> s.sort().to_pylist()
    [1.0, 3.0, None]
    >>> s.mean()
    2.0

Null values are always skipped by aggregations.

Rows can also be grouped by their index labels through
:meth:`Series.group_by_index`, which provides a :class:`Grouping`
that supports aggregating each group.
"""

from .grouping import Grouping
from .series import Element, Series

__all__ = ("Series", "Element", "Grouping")
