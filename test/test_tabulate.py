import datetime

import pytest

from labelframe import Config, DataFrame, Series
from labelframe.index import Index, Level
from labelframe.utils.tabulate import (
    DisplayOptions,
    elide,
    format_dataframe,
    format_series,
    format_value,
    index_rows,
)


@pytest.mark.parametrize(
    "value, null, expected",
    [
        (1.5, False, "1.50"),
        (True, False, "true"),
        (False, False, "false"),
        (3, False, "3"),
        ("x" * 40, False, "x" * 27 + "..."),
        (datetime.datetime(2020, 1, 2, 3, 4, 5), False, "2020-01-02 03:04:05"),
        (0, True, "NaN"),
    ],
)
def test_format_value(value, null, expected):
    assert format_value(value, null) == expected


def test_format_value_options():
    options = DisplayOptions(max_width=5, float_precision=0, time_format="%Y")
    assert format_value(1.4, options=options) == "1"
    assert format_value("abcdefgh", options=options) == "ab..."
    assert format_value(datetime.datetime(2020, 1, 1), options=options) == "2020"


def test_elide():
    rows = [["a", "x", "1"], ["a", "x", "2"], ["a", "y", "2"], ["b", "y", "3"]]
    assert elide(rows) == [
        ["a", "x", "1"],
        ["", "", "2"],
        ["", "y", "2"],
        ["b", "", "3"],
    ]


def test_index_rows():
    index = Index(Level(["a", "a", "b"]), Level([1, 1, 1]))
    assert index_rows(index, 3) == [["a", "1"], ["", "1"], ["b", "1"]]
    assert index_rows(index, 1) == [["a", "1"]]


def test_format_series_multi_index():
    s = Series(
        ["foo", "bar", "baz"],
        Config(multi_index=[["a", "a", "b"], [1, 2, 1]], multi_index_names=["letter", "number"]),
    )
    assert format_series(s) == "\n".join(
        [
            "letter  number",
            "     a       1    foo",
            "             2    bar",
            "     b       1    baz",
            "kind: string",
        ]
    )


def test_format_series_nulls_and_max_rows():
    s = Series([1.0, None, 3.0])
    assert format_series(s, DisplayOptions(max_rows=2)) == "\n".join(
        [
            "0    1.00",
            "1    NaN",
            "... and 1 more rows",
            "kind: float",
        ]
    )


def test_format_series_empty():
    assert format_series(Series()) == "Series{}"
    assert format_series(Series([])) == "kind: generic"


def test_format_dataframe_multi_col():
    df = DataFrame(
        [[1, 2], [3, 4], [5, 6]],
        Config(multi_col=[["a", "a", "b"], ["x", "y", "x"]], index_name="idx"),
    )
    assert format_dataframe(df) == "\n".join(
        [
            "       a         b",
            "       x    y    x",
            "idx",
            "  0    1    3    5",
            "  1    2    4    6",
        ]
    )
