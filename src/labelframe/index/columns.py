"""Column identity of DataFrames.

Columns are the equivalent of an :class:`labelframe.index.Index`
for the columns of a DataFrame: one or more levels of labels,
each level with one label per column.
Unlike index levels, column labels are plain python values
with no kind, they are never converted nor aggregated.
"""

import itertools
from typing import Any, Self

from ..config import Config
from ..errors import BoundsError, ConstructionError, LabelNotFoundError
from ..values import is_null_input, is_scalar, render
from .index import Index
from .level import LabelMap


class ColLevel:
    """A single level of column labels with its label map."""

    def __init__(self, labels: Any = None, name: str = "") -> None:
        self.labels = list(labels) if labels is not None else []
        for label in self.labels:
            if not is_scalar(label):
                raise ConstructionError(f"unsupported column label type: {type(label).__name__}")
        self.name = name
        self.label_map: LabelMap = {}
        self.refresh()

    @classmethod
    def default(cls, n: int, name: str = "") -> Self:
        return cls(range(n), name)

    def __len__(self) -> int:
        return len(self.labels)

    def __repr__(self) -> str:
        return f"ColLevel(name={self.name!r}, labels={self.labels})"

    def refresh(self) -> None:
        label_map: LabelMap = {}
        for pos, label in enumerate(self.labels):
            label_map.setdefault(render(label, is_null_input(label)), []).append(pos)
        self.label_map = label_map

    def positions(self, label: Any) -> list[int]:
        try:
            return list(self.label_map[render(label, is_null_input(label))])
        except KeyError:
            raise LabelNotFoundError(label) from None

    def subset(self, positions: list[int]) -> Self:
        for pos in positions:
            if not isinstance(pos, int) or pos < 0 or pos >= len(self):
                raise BoundsError(f"invalid column position: {pos} (max {len(self) - 1})")
        return self.__class__([self.labels[pos] for pos in positions], self.name)

    def copy(self) -> Self:
        return self.__class__(self.labels, self.name)

    def equals(self, other: "ColLevel") -> bool:
        return (
            isinstance(other, ColLevel)
            and self.name == other.name
            and self.labels == other.labels
            and self.label_map == other.label_map
        )


class Columns(Index):
    """An ordered collection of column levels sharing the same length.

    >>> cols = Columns(ColLevel(["fooCol", "barCol"]))
    >>> len(cols), cols.num_levels
    (2, 1)
    """

    level_class = ColLevel

    @classmethod
    def from_config(cls, config: Config, n: int) -> Self:
        """Build the columns described by a construction config.

        :param config: The construction options.
        :param n: The number of columns.
        """
        config.validate()
        if config.cols is None and config.multi_col is None:
            return cls.default(n, config.cols_name)

        if config.cols is not None:
            levels = [ColLevel(config.cols, config.cols_name)]
        else:
            names = config.multi_col_names or []
            levels = [
                ColLevel(labels, name)
                for labels, name in itertools.zip_longest(config.multi_col, names, fillvalue="")
            ]
        for level in levels:
            if len(level) != n:
                raise ConstructionError(
                    f"mismatch between supplied columns length ({len(level)}) and number of columns ({n})"
                )
        return cls(*levels)
