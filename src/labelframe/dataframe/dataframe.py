"""The DataFrame object itself."""

import logging
from typing import Any, Callable, Self

import pyarrow as pa

from ..config import Config
from ..errors import AlignmentError, AmbiguousConfigError, ConstructionError, LabelNotFoundError
from ..index import Columns, Index, Level
from ..kinds import Kind
from ..series import Series
from ..values import Values, render

logger = logging.getLogger(__name__)


class DataFrame:
    """Data structure that handles data in rows and columns.

    A DataFrame is a collection of Series sharing the same index,
    each Series is a column of the DataFrame and is labeled
    by the :class:`labelframe.index.Columns`.

    >>> from labelframe import Config
    >>> df = DataFrame(
    ...     [[1, 2, 3], [4, 5, 6]],
    ...     Config(cols=["fooCol", "barCol"], index=["foo", "bar", "baz"]),
    ... )
    >>> df.sum().to_pylist()
    [6.0, 15.0]

    Like Series, DataFrames are never partially modified
    by an operation that failed.
    """

    def __init__(self, data: Any = None, config: Config | None = None) -> None:
        """
        :param data: The columns of the DataFrame, either a list of columns,
                     a dictionary of ``{label: column}`` or a
                     :class:`pyarrow.Table`/:class:`pyarrow.RecordBatch`.
                     Each column can be anything accepted by :class:`labelframe.Series`.
        :param config: The construction options, like the index and column labels.
        """
        config = config or Config()
        config.validate()

        labels, columns_data = self._unpack(data)
        if labels is not None:
            if config.cols is not None or config.multi_col is not None:
                raise AmbiguousConfigError(
                    "column labels were provided both by the data and by the config"
                )

        values_config = Config(kind=config.kind)
        series = [
            Series(column.values, values_config) if isinstance(column, Series)
            else Series(column, values_config)
            for column in columns_data
        ]
        lengths = {len(s) for s in series}
        if len(lengths) > 1:
            raise ConstructionError(f"all columns must have the same length, got: {sorted(lengths)}")
        nrows = lengths.pop() if lengths else 0

        index = Index.from_config(config, nrows)
        if labels is not None:
            columns = Columns.from_config(Config(cols=labels, cols_name=config.cols_name), len(series))
        else:
            columns = Columns.from_config(config, len(series))
        self._setup(series, index, columns, config.name)

    @staticmethod
    def _unpack(data: Any) -> tuple[list[Any] | None, list[Any]]:
        """Split the input data in column labels (if any) and columns."""
        if data is None:
            return None, []
        if isinstance(data, (pa.Table, pa.RecordBatch)):
            return list(data.column_names), list(data.columns)
        if isinstance(data, dict):
            return list(data.keys()), list(data.values())
        if isinstance(data, (list, tuple)):
            return None, list(data)
        raise ConstructionError(f"unsupported data type: {type(data).__name__}")

    def _setup(self, series: list[Series], index: Index, columns: Columns, name: str) -> None:
        self.series = series
        self.index = index
        self.columns = columns
        self.name = name
        for pos, s in enumerate(self.series):
            s.index = index.copy()
            s.name = render(columns.levels[0].labels[pos])

    @classmethod
    def from_components(
        cls, series: list[Series], index: Index, columns: Columns, name: str = ""
    ) -> Self:
        """Build a DataFrame out of its Series, index and columns.

        Every Series gets its own copy of the index.
        """
        if len(columns) != len(series):
            raise ConstructionError(
                f"mismatch between columns length ({len(columns)}) and number of series ({len(series)})"
            )
        df = cls.__new__(cls)
        df._setup(series, index, columns, name)
        return df

    def __len__(self) -> int:
        """The number of rows."""
        return len(self.index)

    def __str__(self) -> str:
        from ..utils.tabulate import format_dataframe

        return format_dataframe(self)

    def __repr__(self) -> str:
        return (
            f"DataFrame(name={self.name!r}, columns={self.columns!r}, "
            f"rows={len(self)}, index_levels={self.index_levels})"
        )

    @property
    def num_cols(self) -> int:
        return len(self.series)

    @property
    def index_levels(self) -> int:
        return self.index.num_levels

    @property
    def col_levels(self) -> int:
        return self.columns.num_levels

    def rename(self, name: str) -> None:
        self.name = name

    def copy(self) -> Self:
        """Deep copy of the DataFrame, no storage is shared with the original."""
        df = self.__class__.__new__(self.__class__)
        df.series = [s.copy() for s in self.series]
        df.index = self.index.copy()
        df.columns = self.columns.copy()
        df.name = self.name
        return df

    def equals(self, other: "DataFrame") -> bool:
        """If two DataFrames have the same Series, index, columns and name."""
        return (
            isinstance(other, DataFrame)
            and self.num_cols == other.num_cols
            and all(s1.equals(s2) for s1, s2 in zip(self.series, other.series))
            and self.index.equals(other.index)
            and self.columns.equals(other.columns)
            and self.name == other.name
        )

    def ensure_alignment(self) -> None:
        """Check that every Series shares the index of the DataFrame."""
        if not self.index.aligned():
            raise AlignmentError("index levels have different lengths")
        if len(self.columns) != self.num_cols:
            raise AlignmentError(
                f"{len(self.columns)} column labels for {self.num_cols} columns"
            )
        for pos, s in enumerate(self.series):
            s.ensure_alignment()
            if len(s) != len(self.index):
                raise AlignmentError(
                    f"column {pos} has {len(s)} rows, but the index has {len(self.index)}"
                )

    def select_by_rows(self, positions: list[int]) -> Self:
        """New DataFrame with only the rows at the given positions."""
        self.ensure_alignment()
        positions = list(positions)
        index = self.index.take(positions)
        series = [s.subset(positions) for s in self.series]
        return self.from_components(series, index, self.columns.copy(), self.name)

    def select_by_cols(self, positions: list[int]) -> Self:
        """New DataFrame with only the columns at the given positions."""
        self.ensure_alignment()
        # Raises BoundsError on invalid positions.
        columns = self.columns.take(positions)
        series = [self.series[pos].copy() for pos in positions]
        return self.from_components(series, self.index.copy(), columns, self.name)

    def subset(self, positions: list[int]) -> Self:
        """Like :meth:`select_by_rows` but at least one row must be selected."""
        if not positions:
            raise ConstructionError("no rows provided")
        return self.select_by_rows(positions)

    def col(self, label: Any) -> Series:
        """The first column whose label on the first column level matches.

        When no column matches, a warning is logged
        and an empty Series is returned.
        """
        try:
            positions = self.columns.levels[0].positions(label)
        except LabelNotFoundError:
            logger.warning("invalid column label: %s not in labels", label)
            return Series()
        return self.series[positions[0]].copy()

    def _columns_as_index(self) -> Index:
        return Index(*(Level(list(level.labels), level.name) for level in self.columns.levels))

    def aggregate(self, method: Callable[[Series], Any], kind: Kind = Kind.FLOAT) -> Series:
        """Aggregate each column, the result is labeled by the column labels.

        :param method: Computes the aggregated value of a column.
        :param kind: The kind of the aggregated values.
        """
        results = [method(s) for s in self.series]
        values = Values.for_kind(kind).from_pylist(results)
        return Series.from_components(values, self._columns_as_index(), self.name)

    def sum(self) -> Series:
        return self.aggregate(Series.sum)

    def mean(self) -> Series:
        return self.aggregate(Series.mean)

    def min(self) -> Series:
        return self.aggregate(Series.min)

    def max(self) -> Series:
        return self.aggregate(Series.max)

    def median(self) -> Series:
        return self.aggregate(Series.median)

    def count(self) -> Series:
        return self.aggregate(Series.count, kind=Kind.INT)

    def kinds(self) -> Series:
        """The kind of each column, labeled by the column labels."""
        values = Values.for_kind(Kind.STRING).from_pylist([str(s.kind) for s in self.series])
        return Series.from_components(values, self._columns_as_index(), "kinds")

    @property
    def kind(self) -> str:
        """The kind shared by all the columns or ``"mixed"``."""
        kinds = {s.kind for s in self.series}
        if len(kinds) == 1:
            return str(kinds.pop())
        return "mixed"

    def to_arrow(self) -> pa.Table:
        """Export the columns to a :class:`pyarrow.Table`.

        Column names are the rendering of the labels of the first column level.
        """
        return pa.Table.from_arrays(
            [s.values.to_arrow() for s in self.series],
            names=[render(label) for label in self.columns.levels[0].labels],
        )
