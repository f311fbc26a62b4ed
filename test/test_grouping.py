import logging

import pytest

from labelframe import Config, Series
from labelframe.errors import LabelNotFoundError, TypeUnsupportedError
from labelframe.kinds import Kind


@pytest.fixture
def employees():
    return Series(
        [10, 15, 8, 12, 20],
        Config(
            multi_index=[
                ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
                ["Shop A", "Shop B", "Shop A", "Shop A", "Shop B"],
            ],
            multi_index_names=["city", "shop"],
            name="n_employees",
        ),
    )


def test_groups(employees):
    grouping = employees.group_by_index()
    assert len(grouping) == 3
    assert grouping.groups() == ["Los Angeles Shop A", "New York Shop A", "New York Shop B"]
    assert grouping.positions("New York Shop B") == [1, 4]


def test_group(employees):
    group = employees.group_by_index().group("Los Angeles Shop A")
    assert group.to_pylist() == [8, 12]
    assert group.index.names == ["city", "shop"]
    assert group.name == "n_employees"


def test_group_missing_key(employees):
    grouping = employees.group_by_index()
    with pytest.raises(LabelNotFoundError):
        grouping.group("Boston Shop A")
    with pytest.raises(LabelNotFoundError):
        grouping.positions("Boston")


@pytest.mark.parametrize(
    "method, expected",
    [
        ("sum", [20.0, 10.0, 35.0]),
        ("mean", [10.0, 10.0, 17.5]),
        ("min", [8.0, 10.0, 15.0]),
        ("max", [12.0, 10.0, 20.0]),
        ("median", [10.0, 10.0, 17.5]),
        ("count", [2, 1, 2]),
    ],
)
def test_group_aggregation(employees, method, expected):
    result = getattr(employees.group_by_index(), method)()
    assert result.to_pylist() == expected
    assert result.kind is (Kind.INT if method == "count" else Kind.FLOAT)
    assert result.name == "n_employees"
    assert result.index.names == ["city", "shop"]
    assert [lvl.labels.to_pylist() for lvl in result.index.levels] == [
        ["Los Angeles", "New York", "New York"],
        ["Shop A", "Shop A", "Shop B"],
    ]


def test_group_keeps_series_untouched(employees):
    before = employees.copy()
    employees.group_by_index().sum()
    assert employees.equals(before)


def test_group_null_labels():
    s = Series([1, 2, 3], Config(index=["a", None, None]))
    grouping = s.group_by_index()
    assert grouping.groups() == ["NaN", "a"]
    result = grouping.sum()
    assert result.to_pylist() == [5.0, 1.0]
    assert result.index.levels[0].labels.to_pylist() == [None, "a"]


def test_group_non_numeric():
    s = Series(["x", "y"], Config(index=["a", "a"]))
    grouping = s.group_by_index()
    assert grouping.group("a").to_pylist() == ["x", "y"]
    with pytest.raises(TypeUnsupportedError):
        grouping.sum()


def test_group_empty_series():
    grouping = Series([], Config(kind="int")).group_by_index()
    assert len(grouping) == 0
    assert len(grouping.sum()) == 0


def test_group_logs(employees, caplog):
    with caplog.at_level(logging.DEBUG, logger="labelframe"):
        employees.group_by_index()
    assert "grouped 5 rows into 3 groups" in caplog.text


def test_group_sum_past_int64():
    s = Series([2**62, 2**62], Config(index=["a", "a"]))
    assert s.group_by_index().sum().to_pylist() == [2.0**63]
