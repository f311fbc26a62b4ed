"""Two dimensional labeled data.

A DataFrame is a table whose rows are identified by an
:class:`labelframe.index.Index` and whose columns are identified
by :class:`labelframe.index.Columns`. Each column is a
:class:`labelframe.Series` holding values of a single kind,
different columns can hold different kinds.

DataFrames can be built from a list of columns,
from a dictionary of ``{label: column}`` or from
Arrow tables and record batches::

    >>> import pyarrow as pa
    >>> df = DataFrame(pa.table({"a": [1, 2], "b": [1.5, 2.5]}))
    >>> df.kind
    'mixed'
    >>> df.col("b").to_pylist()
    [1.5, 2.5]

Aggregating a DataFrame aggregates each of its columns,
leading to a Series labeled by the column labels.
"""

from .dataframe import DataFrame

__all__ = ("DataFrame",)
