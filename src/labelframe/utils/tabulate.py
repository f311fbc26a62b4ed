"""Format Series and DataFrames into text tables for print.

The rendering is driven by a :class:`DisplayOptions` object,
the defaults are used when no options are provided.
Index labels are right aligned, floats are formatted to
a fixed number of decimals and long strings are truncated.

Example:

    >>> from labelframe import Config, Series
    >>> s = Series([1.5, 2.0], Config(index=["a", "b"], name="prices"))
    >>> print(format_series(s))
    a    1.50
    b    2.00
    kind: float
    name: prices

For every index level but the last one, a label equal
to the label printed on the row above is left blank,
so that multi level indices read like groups::

    a  x    1
       y    2
    b  x    3
"""

import dataclasses
import datetime
from typing import TYPE_CHECKING, Any

from ..index import Index
from ..kinds import Kind
from ..values import NULL_STRING

if TYPE_CHECKING:
    from ..dataframe import DataFrame
    from ..series import Series


@dataclasses.dataclass(frozen=True)
class DisplayOptions:
    """How Series and DataFrames get rendered as text.

    :param max_width: Longer labels and values are truncated with ``...``.
    :param float_precision: Number of decimals of floating point values.
    :param time_format: :meth:`datetime.datetime.strftime` format of datetime values.
    :param index_buffer: Spaces between index levels.
    :param values_buffer: Spaces between the index and the values,
                          and between columns of a DataFrame.
    :param max_rows: Rows past this limit are not displayed.
    """

    max_width: int = 30
    float_precision: int = 2
    time_format: str = "%Y-%m-%d %H:%M:%S"
    index_buffer: int = 2
    values_buffer: int = 4
    max_rows: int = 20


def truncate(text: str, max_width: int) -> str:
    if len(text) > max_width:
        return text[: max_width - 3] + "..."
    return text


def format_value(v: Any, null: bool = False, options: DisplayOptions | None = None) -> str:
    """Format a value to be printed in the table.

    This function will format floats and datetimes
    according to the options, and truncate long strings.
    """
    options = options or DisplayOptions()
    if null:
        return NULL_STRING
    if isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, float):
        v = f"{v:.{options.float_precision}f}"
    elif isinstance(v, datetime.datetime):
        v = v.strftime(options.time_format)
    return truncate(str(v), options.max_width)


def elide(rows: list[list[str]]) -> list[list[str]]:
    """Blank repeated labels on every level except the last.

    A label is blanked when it is equal to the last label
    printed on the same level.
    """
    prior: dict[int, str] = {}
    elided = []
    for row in rows:
        new_row = []
        for level, label in enumerate(row):
            if level != len(row) - 1:
                if prior.get(level) == label:
                    label = ""
                else:
                    prior[level] = label
            new_row.append(label)
        elided.append(new_row)
    return elided


def index_rows(index: Index, nrows: int, options: DisplayOptions | None = None) -> list[list[str]]:
    """The printable labels of the first ``nrows`` rows, one per level."""
    options = options or DisplayOptions()
    rows = [
        [format_value(*level.labels.element(pos), options=options) for level in index.levels]
        for pos in range(nrows)
    ]
    return elide(rows)


def compute_max_colsize(header: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(header[colidx])])
        for colidx, _ in enumerate(header)
    ]


def maketablerow(cols: list[str], colsizes: list[int], buffer: int, right: bool = False) -> str:
    """Make a table row with the given column sizes."""
    return (" " * buffer).join(
        col.rjust(colsizes[idx]) if right else col.ljust(colsizes[idx])
        for idx, col in enumerate(cols)
    )


def _more_rows(total: int, options: DisplayOptions) -> list[str]:
    if total > options.max_rows:
        return [f"... and {total - options.max_rows} more rows"]
    return []


def format_series(series: "Series", options: DisplayOptions | None = None) -> str:
    """Format a Series into text.

    Will produce a string like::

        letter  number
             a       1    foo
                     2    bar
        kind: string
    """
    options = options or DisplayOptions()
    if series.kind is Kind.NONE and len(series) == 0:
        return "Series{}"

    nrows = min(len(series), options.max_rows)
    names = [truncate(name, options.max_width) for name in series.index.names]
    labels = index_rows(series.index, nrows, options)
    widths = compute_max_colsize(names, labels)

    lines = []
    if any(name.strip() for name in names):
        lines.append(maketablerow(names, widths, options.index_buffer, right=True))
    for pos, row in enumerate(labels):
        value = format_value(*series.values.element(pos), options=options)
        line = maketablerow(row, widths, options.index_buffer, right=True)
        lines.append(line + " " * options.values_buffer + value)
    lines += _more_rows(len(series), options)

    if series.kind is not Kind.NONE:
        lines.append(f"kind: {series.kind}")
    if series.name:
        lines.append(f"name: {series.name}")
    return "\n".join(lines)


def format_dataframe(df: "DataFrame", options: DisplayOptions | None = None) -> str:
    """Format a DataFrame into text.

    Column labels are printed above the columns, one header
    row for each column level, with the same blanking
    of repeated labels applied to the index levels::

               fooCol    barCol
        foo    1         4
        bar    2         5
    """
    options = options or DisplayOptions()
    if df.num_cols == 0 and len(df) == 0:
        return "DataFrame{}"

    nrows = min(len(df), options.max_rows)
    index_names = [truncate(name, options.max_width) for name in df.index.names]
    labels = index_rows(df.index, nrows, options)
    index_widths = compute_max_colsize(index_names, labels)

    # Column levels are elided along the columns, like index levels along the rows.
    col_labels = [
        [format_value(label, options=options) for label in column]
        for column in zip(*(level.labels for level in df.columns.levels))
    ]
    col_headers = [list(level_row) for level_row in zip(*elide(col_labels))] or [[]]
    values = [
        [format_value(*s.values.element(pos), options=options) for s in df.series]
        for pos in range(nrows)
    ]
    value_widths = [
        max([len(header[colidx]) for header in col_headers] + [len(row[colidx]) for row in values])
        for colidx in range(df.num_cols)
    ]

    def line(index_cells: list[str], value_cells: list[str]) -> str:
        text = maketablerow(index_cells, index_widths, options.index_buffer, right=True)
        text += " " * options.values_buffer
        text += maketablerow(value_cells, value_widths, options.values_buffer)
        return text.rstrip()

    blank_index = [""] * len(index_widths)
    lines = [line(blank_index, header) for header in col_headers]
    if any(name.strip() for name in index_names):
        lines.append(line(index_names, [""] * df.num_cols))
    lines += [line(index_cells, row) for index_cells, row in zip(labels, values)]
    lines += _more_rows(len(df), options)

    if df.name:
        lines.append(f"name: {df.name}")
    return "\n".join(lines)
