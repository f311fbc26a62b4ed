import datetime
import math

import pyarrow as pa
import pytest

from labelframe import Config, Series, equal
from labelframe.errors import (
    AlignmentError,
    AmbiguousConfigError,
    BoundsError,
    ConstructionError,
    TypeMismatchError,
    TypeUnsupportedError,
)
from labelframe.kinds import Kind

UTC = datetime.timezone.utc


@pytest.fixture
def numbers():
    return Series([3, 1, 2], Config(index=["c", "a", "b"], index_name="letter", name="numbers"))


@pytest.fixture
def multi():
    return Series(
        [1.0, 2.0, 3.0, 4.0],
        Config(multi_index=[["a", "a", "b", "b"], [1, 2, 1, 2]], multi_index_names=["x", "y"]),
    )


def test_empty_series():
    s = Series()
    assert s.kind is Kind.NONE
    assert len(s) == 0
    assert s.index.num_levels == 1
    assert str(s) == "Series{}"


def test_series_kinds():
    assert Series([1, 2]).kind is Kind.INT
    assert Series([]).kind is Kind.GENERIC
    assert Series([None]).kind is Kind.GENERIC
    assert Series(1.5).kind is Kind.FLOAT
    assert Series(pa.array(["a", "b"])).kind is Kind.STRING


def test_series_default_index(numbers):
    s = Series(["a", "b"])
    assert s.index.levels[0].labels.to_pylist() == [0, 1]
    assert numbers.index.names == ["letter"]
    assert numbers.name == "numbers"


def test_series_target_kind():
    s = Series([1, 2], Config(kind="float"))
    assert s.kind is Kind.FLOAT
    assert s.to_pylist() == [1.0, 2.0]

    s = Series(["1", "x"], Config(kind=Kind.INT))
    assert s.to_pylist() == [1, None]

    with pytest.raises(ConstructionError):
        Series([1], Config(kind="complex"))


@pytest.mark.parametrize(
    "config, error",
    [
        (Config(index=["a"]), ConstructionError),
        (Config(index=["a", "b"], multi_index=[["a", "b"]]), AmbiguousConfigError),
        (Config(cols=["a"]), ConstructionError),
        (Config(multi_index=[["a", "b"]], multi_index_names=["x", "y"]), ConstructionError),
    ],
)
def test_series_invalid_config(config, error):
    with pytest.raises(error):
        Series([1, 2], config)


def test_series_unsupported_data():
    with pytest.raises(ConstructionError):
        Series({"a": 1})
    with pytest.raises(ConstructionError):
        Series([[1, 2]])


def test_element(multi):
    element = multi.element(2)
    assert element.value == 3.0
    assert not element.null
    assert element.labels == ["b", 1]
    assert element.label_kinds == [Kind.STRING, Kind.INT]
    with pytest.raises(BoundsError):
        multi.element(4)


def test_at_and_index_at(multi):
    s = Series([1, None], Config(index=["a", "b"]))
    assert s.at(0) == 1
    assert s.at(1) is None
    assert multi.index_at(3, level=1) == 2
    with pytest.raises(BoundsError):
        multi.index_at(0, level=2)


def test_valid_and_null():
    s = Series([1.0, None, float("nan"), 4.0])
    assert s.valid() == [0, 3]
    assert s.null() == [1, 2]


def test_subset(numbers):
    subset = numbers.subset([2, 0, 2])
    assert subset.to_pylist() == [2, 3, 2]
    assert subset.index.levels[0].labels.to_pylist() == ["b", "c", "b"]
    assert subset.index.levels[0].label_map == {"b": [0, 2], "c": [1]}
    assert subset.name == "numbers"
    with pytest.raises(BoundsError):
        numbers.subset([3])


def test_select_levels(multi):
    s = multi.select_levels([1])
    assert s.index.names == ["y"]
    assert s.to_pylist() == multi.to_pylist()
    with pytest.raises(BoundsError):
        multi.select_levels([2])


def test_insert(numbers):
    result = numbers.insert(1, 10, "z")
    assert result.to_pylist() == [3, 10, 1, 2]
    assert result.index.levels[0].labels.to_pylist() == ["c", "z", "a", "b"]
    assert result.index.levels[0].label_map["z"] == [1]
    # the original is untouched
    assert numbers.to_pylist() == [3, 1, 2]


def test_insert_inplace(numbers):
    assert numbers.insert(3, None, "d", inplace=True) is None
    assert numbers.to_pylist() == [3, 1, 2, None]
    assert numbers.index.levels[0].positions("d") == [3]


def test_insert_multi_index(multi):
    result = multi.insert(0, 0.5, ["c", 3])
    assert result.element(0).labels == ["c", 3]
    with pytest.raises(ConstructionError):
        multi.insert(0, 0.5, "c")


def test_insert_failure_leaves_series_untouched(multi):
    before = multi.copy()
    with pytest.raises(TypeMismatchError):
        multi.insert(0, 0.5, ["c", "not an int"], inplace=True)
    with pytest.raises(TypeMismatchError):
        multi.insert(0, "not a float", ["c", 3], inplace=True)
    with pytest.raises(BoundsError):
        multi.insert(5, 0.5, ["c", 3], inplace=True)
    assert multi.equals(before)


def test_insert_into_empty_series():
    s = Series()
    s.insert(0, "a", 0, inplace=True)
    assert s.kind is Kind.GENERIC
    assert s.to_pylist() == ["a"]


def test_append(numbers):
    result = numbers.append(4, "d")
    assert result.to_pylist() == [3, 1, 2, 4]
    assert result.index_at(3) == "d"


def test_drop(numbers):
    result = numbers.drop(0)
    assert result.to_pylist() == [1, 2]
    assert result.index.levels[0].label_map == {"a": [0], "b": [1]}
    with pytest.raises(BoundsError):
        numbers.drop(3)


def test_drop_rows_and_null():
    s = Series([1.0, None, 3.0, None], Config(index=["a", "b", "c", "d"]))
    assert s.drop_rows([0, 2]).to_pylist() == [None, None]
    assert s.drop_null().index.levels[0].labels.to_pylist() == ["a", "c"]
    with pytest.raises(BoundsError):
        s.drop_rows([0, 4])
    s.drop_null(inplace=True)
    assert s.to_pylist() == [1.0, 3.0]


def test_join(numbers):
    other = Series([4.5, 5.0], Config(index=["d", "e"]))
    result = numbers.join(other)
    assert result.kind is Kind.INT
    assert result.to_pylist() == [3, 1, 2, 4, 5]
    assert result.index.levels[0].positions("e") == [4]


def test_join_converts_labels():
    s = Series([1], Config(index=[1]))
    result = s.join(Series([2], Config(index=["x"])))
    assert result.index.levels[0].labels.to_pylist() == [1, None]


def test_join_onto_empty_series(numbers):
    s = Series(None, Config(name="target"))
    s.join(numbers, inplace=True)
    assert s.kind is Kind.INT
    assert s.name == "target"
    assert s.to_pylist() == [3, 1, 2]
    assert numbers.join(Series()).equals(numbers)


def test_join_mismatched_levels(numbers, multi):
    with pytest.raises(ConstructionError):
        numbers.join(multi)


def test_sort():
    s = Series([2, None, 1, 2], Config(index=["a", "b", "c", "d"]))
    result = s.sort()
    assert result.to_pylist() == [1, 2, 2, None]
    assert result.index.levels[0].labels.to_pylist() == ["c", "a", "d", "b"]
    result = s.sort(ascending=False)
    assert result.index.levels[0].labels.to_pylist() == ["a", "d", "c", "b"]


def test_sort_index(numbers):
    result = numbers.sort_index()
    assert result.to_pylist() == [1, 2, 3]
    assert result.index.levels[0].label_map == {"a": [0], "b": [1], "c": [2]}
    numbers.sort_index(ascending=False, inplace=True)
    assert numbers.to_pylist() == [3, 2, 1]


def test_rename(numbers):
    assert numbers.rename("other").name == "other"
    assert numbers.name == "numbers"


def test_to(numbers):
    result = numbers.to("string")
    assert result.kind is Kind.STRING
    assert result.to_pylist() == ["3", "1", "2"]
    assert numbers.kind is Kind.INT


def test_index_to(multi):
    result = multi.index_to(Kind.FLOAT, level=1)
    assert result.index.kinds() == [Kind.STRING, Kind.FLOAT]
    assert result.index.levels[1].positions(1.0) == [0, 2]
    with pytest.raises(BoundsError):
        multi.index_to(Kind.FLOAT, level=2)


def test_aggregations():
    s = Series([1, 2, 3, 4, None])
    assert s.sum() == 10.0
    assert s.mean() == 2.5
    assert s.min() == 1.0
    assert s.max() == 4.0
    assert s.count() == 4
    assert s.median() == 2.5
    assert s.quartile(0) == 1.0
    assert s.quartile(4) == 4.0
    assert s.quantile(0.25) == 1.75


def test_aggregations_empty():
    s = Series([], Config(kind="float"))
    assert s.sum() == 0.0
    assert math.isnan(s.mean())
    assert s.count() == 0


@pytest.mark.parametrize("q", [-1, 5, 1.5])
def test_quartile_bounds(q):
    with pytest.raises(BoundsError):
        Series([1, 2]).quartile(q)


@pytest.mark.parametrize("data", [["a"], [True], [1, "a"], [datetime.datetime(2020, 1, 1)]])
def test_aggregations_unsupported(data):
    s = Series(data)
    with pytest.raises(TypeUnsupportedError):
        s.sum()
    with pytest.raises(TypeUnsupportedError):
        s.count()


def test_value_counts_and_unique():
    s = Series(["b", "a", "b", None, ""])
    assert s.value_counts() == {"b": 2, "a": 1, "": 1}
    assert s.unique() == ["b", "a", ""]


def test_earliest_latest():
    dates = [datetime.datetime(2020, 1, 2), None, datetime.datetime(2019, 5, 1)]
    s = Series(dates)
    assert s.earliest() == datetime.datetime(2019, 5, 1, tzinfo=UTC)
    assert s.latest() == datetime.datetime(2020, 1, 2, tzinfo=UTC)
    assert Series([None], Config(kind="datetime")).earliest() is None
    with pytest.raises(TypeUnsupportedError):
        Series([1]).earliest()


def test_describe_numeric():
    s = Series([1, 2, 3, 4], Config(name="n"))
    description = s.describe(precision=1)
    assert description.kind is Kind.STRING
    assert description.name == "n"
    assert description.index.levels[0].labels.to_pylist() == [
        "len", "valid", "null", "mean", "min", "25%", "50%", "75%", "max"
    ]
    assert description.to_pylist() == ["4", "4", "0", "2.5", "1.0", "1.8", "2.5", "3.2", "4.0"]


def test_describe_string():
    description = Series(["a", "a", None]).describe()
    assert description.to_pylist() == ["3", "2", "1", "1"]


def test_describe_bool():
    description = Series([True, False, True, True]).describe(precision=2)
    assert description.to_pylist() == ["4", "4", "0", "3.00", "0.75"]


def test_copy_and_equals(numbers):
    copied = numbers.copy()
    assert numbers.equals(copied)
    assert equal(numbers, copied)
    copied.insert(0, 1, "x", inplace=True)
    assert not numbers.equals(copied)
    assert len(numbers) == 3


def test_equals_requires_same_kind():
    assert not Series([1, 2]).equals(Series([1.0, 2.0]))
    assert not equal(Series([1]), 1)


def test_ensure_alignment(numbers):
    numbers.ensure_alignment()
    numbers.index.levels[0].labels.drop(0)
    with pytest.raises(AlignmentError):
        numbers.ensure_alignment()
    with pytest.raises(AlignmentError):
        numbers.subset([0])


def test_str(numbers):
    assert str(numbers) == "\n".join(
        [
            "letter",
            "     c    3",
            "     a    1",
            "     b    2",
            "kind: int",
            "name: numbers",
        ]
    )


@pytest.mark.parametrize("pos", [0, 1, 2, 3])
def test_insert_then_drop_restores(numbers, pos):
    assert numbers.insert(pos, 9, "z").drop(pos).equals(numbers)


def test_float_string_roundtrip():
    s = Series([1.5, -2.25, None, 1e-7])
    assert s.to("string").to("float").equals(s)


def test_aggregations_skip_nulls():
    with_nulls = Series([1.0, None, 2.5, None, 4.0])
    without_nulls = with_nulls.drop_null()
    assert with_nulls.sum() == without_nulls.sum()
    assert with_nulls.mean() == without_nulls.mean()


def test_integer_sum_past_int64():
    assert Series([2**62] * 3).sum() == 3 * 2.0**62


def test_append_requires_labels(numbers):
    with pytest.raises(TypeError):
        numbers.append(4)
    result = numbers.append(4, None)
    assert result.index.levels[0].labels.null() == [3]
    assert result.index.levels[0].positions(None) == [3]
