"""Aggregations that reduce values to a single scalar.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the data stored in a Series.

Aggregations only consider the valid (non null) values,
nulls are always skipped. So the sum of ``[1, None, 3]``
is the same as the sum of ``[1, 3]``.

The same aggregation objects are used to aggregate a whole
Series, each column of a DataFrame or each group of a Grouping.
For example, given the following data::

    city, n_employees
    New York, 10
    New York, 15
    Los Angeles, 8

Grouping by city and applying a :class:`SumAggregation`
to each group would lead to::

    city, n_employees
    Los Angeles, 8
    New York, 25
"""

import abc
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import BoundsError

__all__ = (
    "Aggregation",
    "SumAggregation",
    "MinAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "CountAggregation",
    "QuantileAggregation",
)


class Aggregation(abc.ABC):
    """Base class for aggregations.

    Every aggregation is expected to implement
    a method that computes the aggregated value
    of an array of data.
    """

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    __repr__ = __str__

    @abc.abstractmethod
    def compute(self, data: pa.Array) -> Any: ...


class SimpleAggregation(Aggregation):
    """Provide a base implementation for simple aggregations like min,max,sum.

    Simple aggregations are those where the result is
    a single floating point number computed by a :mod:`pyarrow.compute`
    function. When there is no valid value to aggregate
    the result is ``nan``, unless the function defines
    a value for the empty case, like sum does.

    Integer input is aggregated as floating point numbers,
    so that sums past the int64 range do not wrap around.
    """

    @abc.abstractmethod
    def _aggregate(self, data: pa.Array) -> pa.Scalar: ...

    def compute(self, data: pa.Array) -> float:
        # Large integers lose precision as float64, that's accepted.
        data = data.cast(pa.float64(), safe=False)
        result = self._aggregate(data).as_py()
        if result is None:
            return float("nan")
        return float(result)


class SumAggregation(SimpleAggregation):
    """Compute the sum of the values, the sum of no values is 0."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.sum(data, min_count=0)


class MinAggregation(SimpleAggregation):
    """Compute the min of the values."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.min(data)


class MaxAggregation(SimpleAggregation):
    """Compute the max of the values."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.max(data)


class MeanAggregation(SimpleAggregation):
    """Compute the mean of the values."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.mean(data)


class CountAggregation(Aggregation):
    """Count the valid values."""

    def compute(self, data: pa.Array) -> int:
        return pc.count(data, mode="only_valid").as_py()


class QuantileAggregation(Aggregation):
    """Compute a quantile of the values.

    The quantile is computed ranking the sorted valid
    values and linearly interpolating between the two
    values closest to the requested rank.
    """

    def __init__(self, q: float) -> None:
        """
        :param q: The quantile to compute, between 0 and 1.
        """
        if not 0 <= q <= 1:
            raise BoundsError(f"invalid quantile: {q} (must be between 0 and 1)")
        self.q = q

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.q})"

    __repr__ = __str__

    def compute(self, data: pa.Array) -> float:
        result = pc.quantile(data, q=self.q, interpolation="linear")
        if len(result) == 0 or not result[0].is_valid:
            return float("nan")
        return float(result[0].as_py())
