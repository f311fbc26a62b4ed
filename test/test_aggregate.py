import math

import pyarrow as pa
import pytest

from labelframe.compute.aggregate import (
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    QuantileAggregation,
    SumAggregation,
)
from labelframe.errors import BoundsError

TEST_DATA = pa.array([10, 15, None, 8, 12])


@pytest.mark.parametrize(
    "aggregation, expected",
    [
        (SumAggregation(), 45.0),
        (MinAggregation(), 8.0),
        (MaxAggregation(), 15.0),
        (MeanAggregation(), 11.25),
        (CountAggregation(), 4),
        (QuantileAggregation(0.5), 11.0),
    ],
)
def test_basic_aggregation(aggregation, expected):
    result = aggregation.compute(TEST_DATA)
    assert result == expected
    assert type(result) is type(expected)


def test_empty_aggregation():
    empty = pa.array([], type=pa.float64())
    assert SumAggregation().compute(empty) == 0.0
    assert CountAggregation().compute(empty) == 0
    for aggregation in (MinAggregation(), MaxAggregation(), MeanAggregation(), QuantileAggregation(0.5)):
        assert math.isnan(aggregation.compute(empty))


def test_all_null_aggregation():
    nulls = pa.array([None, None], type=pa.int64())
    assert SumAggregation().compute(nulls) == 0.0
    assert math.isnan(MeanAggregation().compute(nulls))


@pytest.mark.parametrize("q, expected", [(0, 1.0), (0.25, 1.75), (0.75, 3.25), (1, 4.0)])
def test_quantile_interpolation(q, expected):
    assert QuantileAggregation(q).compute(pa.array([4, 1, 3, 2])) == expected


@pytest.mark.parametrize("q", [-0.1, 1.5])
def test_quantile_bounds(q):
    with pytest.raises(BoundsError):
        QuantileAggregation(q)


def test_aggregation_str():
    assert str(SumAggregation()) == "SumAggregation()"
    assert str(QuantileAggregation(0.25)) == "QuantileAggregation(0.25)"


def test_integer_sum_does_not_wrap_around():
    data = pa.array([2**62] * 3)
    assert SumAggregation().compute(data) == 3 * 2.0**62
    assert MeanAggregation().compute(data) == 2.0**62
