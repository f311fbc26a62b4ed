"""Computations shared by Series, Grouping and DataFrame.

The compute module is tightly bound to Apache Arrow,
typed values are stored as :class:`pyarrow.Array` and
their aggregation and sorting is delegated to
:mod:`pyarrow.compute`. Generic values, which can't
be represented as an Arrow array, are sorted in Python.

Aggregations are objects that can be applied to any
Arrow array and always emit a single python scalar:

>>> import pyarrow as pa
>>> SumAggregation().compute(pa.array([1, 2, None, 4]))
7.0
"""

from .aggregate import (
    Aggregation,
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    QuantileAggregation,
    SumAggregation,
)
from .sorting import SortKey, sort_arrow_indices, sort_python_indices

__all__ = (
    "Aggregation",
    "CountAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MinAggregation",
    "QuantileAggregation",
    "SumAggregation",
    "SortKey",
    "sort_arrow_indices",
    "sort_python_indices",
)
