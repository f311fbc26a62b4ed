"""The Series object itself."""

import datetime
from collections import Counter
from typing import Any, NamedTuple, Self

from ..compute import (
    Aggregation,
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    QuantileAggregation,
    SumAggregation,
)
from ..config import Config
from ..errors import (
    AlignmentError,
    BoundsError,
    ConstructionError,
    TypeUnsupportedError,
)
from ..index import Index
from ..kinds import Kind
from ..values import GenericValues, Values, render, values_from


class Element(NamedTuple):
    """A single item of a Series: its value and its index labels."""

    value: Any
    null: bool
    labels: list[Any]
    label_kinds: list[Kind]


class Series:
    """One dimensional labeled data of a single kind.

    A Series is made of :class:`labelframe.values.Values`,
    holding the data, and an :class:`labelframe.index.Index`
    holding the labels of each row. The two must always have
    the same length.

    >>> from labelframe import Config
    >>> s = Series([1, 2, 3], Config(index=["a", "b", "c"], name="numbers"))
    >>> s.kind
    <Kind.INT: 'int'>
    >>> s.sum()
    6.0

    Operations that modify the Series return a new Series
    and leave the original one untouched, unless ``inplace=True``
    is provided, in which case the Series itself is modified
    and ``None`` is returned. When an operation fails
    the Series is never modified.
    """

    def __init__(self, data: Any = None, config: Config | None = None) -> None:
        """
        :param data: A scalar, a sequence of scalars or an Arrow array.
                     ``None`` builds an empty Series.
        :param config: The construction options, like the index labels.
        """
        config = config or Config()
        config.validate()
        if config.cols is not None or config.multi_col is not None:
            raise ConstructionError("cols and multi_col are only supported by DataFrame")

        if data is None:
            values: Values = GenericValues()
            kind = Kind.NONE
        else:
            values = values_from(data)
            kind = values.kind

        target = config.target_kind
        if target is not None and target is not Kind.NONE:
            values = values.convert(target)
            kind = target

        self.values = values
        self.index = Index.from_config(config, len(values))
        self.kind = kind
        self.name = config.name

    @classmethod
    def from_components(
        cls, values: Values, index: Index, name: str = "", kind: Kind | None = None
    ) -> Self:
        """Build a Series that owns the provided values and index.

        No copy is performed, the caller must not retain
        references to the values and index.
        """
        series = cls.__new__(cls)
        series.values = values
        series.index = index
        series.kind = kind or values.kind
        series.name = name
        return series

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        from ..utils.tabulate import format_series

        return format_series(self)

    def __repr__(self) -> str:
        return (
            f"Series(name={self.name!r}, kind={self.kind}, "
            f"values={self.values.to_pylist()}, index={self.index!r})"
        )

    def copy(self) -> Self:
        """Deep copy of the Series, no storage is shared with the original."""
        return self.from_components(
            self.values.copy(), self.index.copy(), self.name, self.kind
        )

    def equals(self, other: "Series") -> bool:
        """If two Series have the same kind, name, values and index."""
        return (
            isinstance(other, Series)
            and self.kind is other.kind
            and self.name == other.name
            and self.values.equals(other.values)
            and self.index.equals(other.index)
        )

    def ensure_alignment(self) -> None:
        """Check that every index level has the same length of the values."""
        for pos, level in enumerate(self.index.levels):
            if len(level) != len(self.values):
                raise AlignmentError(
                    f"index level {pos} has {len(level)} labels, "
                    f"but there are {len(self.values)} values"
                )

    def _finish(self, result: "Series", inplace: bool) -> Self | None:
        """Return the result, or move it into this Series when inplace."""
        if not inplace:
            return result
        self.values = result.values
        self.index = result.index
        self.kind = result.kind
        self.name = result.name
        return None

    # Selection

    def element(self, pos: int) -> Element:
        """The value, null flag and index labels at a position."""
        value, null = self.values.element(pos)
        labels = [level.labels.element(pos).value for level in self.index.levels]
        return Element(value, null, labels, self.index.kinds())

    def at(self, pos: int) -> Any:
        """The value at a position, ``None`` when it is null."""
        value, null = self.values.element(pos)
        return None if null else value

    def index_at(self, pos: int, level: int = 0) -> Any:
        """The label at a position for the given index level."""
        self.index.check_level(level)
        value, null = self.index.levels[level].labels.element(pos)
        return None if null else value

    def to_pylist(self) -> list[Any]:
        """The values as python objects, nulls are ``None``."""
        return self.values.to_pylist()

    def valid(self) -> list[int]:
        """Positions of the non null values."""
        return self.values.valid()

    def null(self) -> list[int]:
        """Positions of the null values."""
        return self.values.null()

    def subset(self, positions: list[int]) -> Self:
        """New Series with only the rows at the given positions.

        Positions can be repeated and in any order,
        the resulting Series follows the order of the positions.
        """
        self.ensure_alignment()
        positions = list(positions)
        return self.from_components(
            self.values.take(positions),
            self.index.take(positions),
            self.name,
            self.kind,
        )

    def select_levels(self, levels: list[int]) -> Self:
        """New Series with only the index levels at the given positions."""
        self.ensure_alignment()
        return self.from_components(
            self.values.copy(), self.index.subset(levels), self.name, self.kind
        )

    # Modification

    def insert(self, pos: int, value: Any, labels: Any, inplace: bool = False) -> Self | None:
        """Insert a row before the given position.

        :param pos: The position of the new row, ``len(series)`` appends it.
        :param value: The value of the new row, must be representable in the Series kind.
        :param labels: One label for each index level, a single
                       label can be provided for single level indices.
                       Labels are never generated, pass ``None`` for a null label.
        :param inplace: Modify the Series instead of returning a new one.
        """
        if not isinstance(labels, (list, tuple)):
            labels = [labels]
        if len(labels) != self.index.num_levels:
            raise ConstructionError(
                f"one label for each index level must be provided: "
                f"supplied {len(labels)}, want {self.index.num_levels}"
            )
        self.values.check_position(pos, len(self))
        # Validate everything upfront, so that a failure leaves no partial insertion.
        self.values.coerce(value)
        for level, label in zip(self.index.levels, labels):
            level.labels.coerce(label)

        result = self.copy()
        result.values.insert(pos, value)
        for level, label in zip(result.index.levels, labels):
            level.labels.insert(pos, label)
        if result.kind is Kind.NONE:
            result.kind = result.values.kind
        result.index.refresh()
        return self._finish(result, inplace)

    def append(self, value: Any, labels: Any, inplace: bool = False) -> Self | None:
        """Add a row at the end of the Series."""
        return self.insert(len(self), value, labels, inplace=inplace)

    def drop(self, pos: int, inplace: bool = False) -> Self | None:
        """Remove the row at the given position."""
        self.values.check_position(pos)
        result = self.copy()
        result.values.drop(pos)
        for level in result.index.levels:
            level.labels.drop(pos)
        result.index.refresh()
        return self._finish(result, inplace)

    def drop_rows(self, positions: list[int], inplace: bool = False) -> Self | None:
        """Remove the rows at the given positions."""
        self.values.check_positions(positions)
        dropped = set(positions)
        result = self.subset([pos for pos in range(len(self)) if pos not in dropped])
        return self._finish(result, inplace)

    def drop_null(self, inplace: bool = False) -> Self | None:
        """Remove all the rows with a null value."""
        return self.drop_rows(self.null(), inplace=inplace)

    def join(self, other: "Series", inplace: bool = False) -> Self | None:
        """Append the rows of another Series.

        The values and index labels of the other Series are converted
        to the kinds of this Series, values that can't be converted
        become nulls, so joining never fails because of kinds.
        """
        if self.kind is Kind.NONE:
            result = other.copy()
            result.name = self.name
            return self._finish(result, inplace)
        if other.kind is Kind.NONE:
            return self._finish(self.copy(), inplace)
        if other.index.num_levels != self.index.num_levels:
            raise ConstructionError(
                f"unable to join a Series with {other.index.num_levels} index levels "
                f"to a Series with {self.index.num_levels} index levels"
            )
        other.ensure_alignment()

        result = self.copy()
        result.values.extend(other.values.convert(result.values.kind))
        for level, other_level in zip(result.index.levels, other.index.levels):
            level.labels.extend(other_level.labels.convert(level.kind))
        result.index.refresh()
        return self._finish(result, inplace)

    def sort(self, ascending: bool = True, inplace: bool = False) -> Self | None:
        """Sort the rows by their values.

        Sorting is stable, rows with equal values keep
        their relative order, null values are placed last.
        """
        result = self.subset(self.values.sort_indices(ascending))
        return self._finish(result, inplace)

    def sort_index(self, ascending: bool = True, inplace: bool = False) -> Self | None:
        """Sort the rows by the labels of the first index level."""
        result = self.subset(self.index.levels[0].labels.sort_indices(ascending))
        return self._finish(result, inplace)

    def rename(self, name: str, inplace: bool = False) -> Self | None:
        result = self.copy()
        result.name = name
        return self._finish(result, inplace)

    # Conversion

    def to(self, kind: Kind | str) -> Self:
        """New Series with the values converted to another kind."""
        kind = Kind(kind)
        result = self.copy()
        result.values = result.values.convert(kind)
        result.kind = kind
        return result

    def index_to(self, kind: Kind | str, level: int = 0) -> Self:
        """New Series with the labels of an index level converted to another kind."""
        kind = Kind(kind)
        self.index.check_level(level)
        result = self.copy()
        result.index.levels[level] = result.index.levels[level].convert(kind)
        result.index.refresh()
        return result

    # Aggregation

    def aggregate(self, aggregation: Aggregation) -> Any:
        """Apply an aggregation to the valid values of the Series."""
        if not self.kind.numeric:
            raise TypeUnsupportedError(
                f"{aggregation} is not supported for {self.kind} values"
            )
        return aggregation.compute(self.values.to_arrow())

    def sum(self) -> float:
        return self.aggregate(SumAggregation())

    def mean(self) -> float:
        return self.aggregate(MeanAggregation())

    def min(self) -> float:
        return self.aggregate(MinAggregation())

    def max(self) -> float:
        return self.aggregate(MaxAggregation())

    def count(self) -> int:
        """Number of valid values."""
        return self.aggregate(CountAggregation())

    def quantile(self, q: float) -> float:
        """The ``q`` quantile (0 to 1) of the valid values, linearly interpolated."""
        return self.aggregate(QuantileAggregation(q))

    def quartile(self, q: int) -> float:
        """The ``q`` quartile, from 0 (the min) to 4 (the max)."""
        if q not in (0, 1, 2, 3, 4):
            raise BoundsError(f"invalid quartile: {q} (must be between 0 and 4)")
        return self.quantile(q / 4)

    def median(self) -> float:
        return self.quartile(2)

    # Description

    def value_counts(self) -> dict[str, int]:
        """Number of occurrences of each valid value, keyed by its text rendering."""
        return dict(Counter(render(value) for value, null in self.values if not null))

    def unique(self) -> list[str]:
        """The distinct valid values rendered as text, in order of appearance."""
        return list(self.value_counts())

    def _valid_datetimes(self) -> list[datetime.datetime]:
        if self.kind is not Kind.DATETIME:
            raise TypeUnsupportedError(f"only datetime values have a time range, not {self.kind}")
        return [value for value, null in self.values if not null]

    def earliest(self) -> datetime.datetime | None:
        """The earliest valid datetime, ``None`` when there are none."""
        return min(self._valid_datetimes(), default=None)

    def latest(self) -> datetime.datetime | None:
        """The latest valid datetime, ``None`` when there are none."""
        return max(self._valid_datetimes(), default=None)

    def describe(self, precision: int = 4) -> "Series":
        """Summary of the key details of the Series.

        Returns a String Series, the details depend on the kind,
        for example numeric Series report mean, min, quartiles and max.

        :param precision: The number of decimals of floating point details.
        """

        def fmt(value: float) -> str:
            return f"{value:.{precision}f}"

        details = {
            "len": str(len(self)),
            "valid": str(len(self.valid())),
            "null": str(len(self.null())),
        }
        if self.kind.numeric:
            details.update(
                {
                    "mean": fmt(self.mean()),
                    "min": fmt(self.min()),
                    "25%": fmt(self.quartile(1)),
                    "50%": fmt(self.quartile(2)),
                    "75%": fmt(self.quartile(3)),
                    "max": fmt(self.max()),
                }
            )
        elif self.kind is Kind.STRING:
            details["unique"] = str(len(self.unique()))
        elif self.kind is Kind.BOOL:
            as_float = self.to(Kind.FLOAT)
            details["sum"] = fmt(as_float.sum())
            details["mean"] = fmt(as_float.mean())
        elif self.kind is Kind.DATETIME:
            details["unique"] = str(len(self.unique()))
            earliest, latest = self.earliest(), self.latest()
            details["earliest"] = render(earliest, earliest is None)
            details["latest"] = render(latest, latest is None)
        return Series(
            list(details.values()), Config(index=list(details.keys()), name=self.name)
        )

    # Grouping

    def group_by_index(self) -> "Grouping":
        """Group the rows by the labels of all their index levels."""
        from .grouping import Grouping

        return Grouping(self)

