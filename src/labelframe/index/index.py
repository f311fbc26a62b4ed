"""Row identity of Series and DataFrames."""

import itertools
from typing import Any, Self

from ..config import Config
from ..errors import BoundsError, ConstructionError
from ..kinds import Kind
from .level import LabelMap, Level


class Index:
    """An ordered collection of levels sharing the same length.

    A single level index has one label for each row,
    a multi level index has one label per level for each row.
    An Index always has at least one level, building an
    index with no levels leads to a single empty level.

    The ``name_map`` records the positions of the levels
    by their name, multiple levels can share the same name.

    >>> idx = Index(Level(["a", "b"], name="letter"), Level([1, 2], name="number"))
    >>> idx.name_map
    {'letter': [0], 'number': [1]}
    """

    level_class: type = Level

    def __init__(self, *levels: Any) -> None:
        """
        :param levels: The levels of the index.
        """
        self.levels = list(levels) if levels else [self.level_class()]
        self.name_map: LabelMap = {}
        self.update_name_map()

    @classmethod
    def default(cls, n: int, name: str = "") -> Self:
        """A single level index with range labels ``0..n-1``."""
        return cls(cls.level_class.default(n, name))

    @classmethod
    def from_config(cls, config: Config, n: int) -> Self:
        """Build the index described by a construction config.

        :param config: The construction options.
        :param n: The number of rows the index must have.
        """
        config.validate()
        if config.index is None and config.multi_index is None:
            return cls.default(n, config.index_name)

        if config.index is not None:
            levels = [cls.level_class(config.index, config.index_name)]
        else:
            names = config.multi_index_names or []
            levels = [
                cls.level_class(labels, name)
                for labels, name in itertools.zip_longest(config.multi_index, names, fillvalue="")
            ]
        for level in levels:
            if len(level) != n:
                raise ConstructionError(
                    f"mismatch between supplied index length ({len(level)}) and expected length ({n})"
                )
        return cls(*levels)

    def __len__(self) -> int:
        """The number of labels in each level."""
        return len(self.levels[0])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(map(repr, self.levels))})"

    @property
    def num_levels(self) -> int:
        return len(self.levels)

    @property
    def names(self) -> list[str]:
        return [level.name for level in self.levels]

    def kinds(self) -> list[Kind]:
        return [level.kind for level in self.levels]

    def update_name_map(self) -> None:
        name_map: LabelMap = {}
        for pos, level in enumerate(self.levels):
            name_map.setdefault(level.name, []).append(pos)
        self.name_map = name_map

    def refresh(self) -> None:
        """Rebuild the name map and the label map of every level."""
        self.update_name_map()
        for level in self.levels:
            level.refresh()

    def aligned(self) -> bool:
        """If all the levels have the same length."""
        return all(len(level) == len(self.levels[0]) for level in self.levels[1:])

    def check_level(self, level: int) -> None:
        if not isinstance(level, int) or level < 0 or level >= self.num_levels:
            raise BoundsError(f"invalid level: {level} (max {self.num_levels - 1})")

    def subset(self, level_positions: list[int]) -> Self:
        """New index with only the levels at the given positions."""
        for pos in level_positions:
            self.check_level(pos)
        return self.__class__(*(self.levels[pos].copy() for pos in level_positions))

    def take(self, positions: list[int]) -> Self:
        """New index with only the labels at the given row positions."""
        return self.__class__(*(level.subset(positions) for level in self.levels))

    def drop(self, level: int) -> None:
        """Remove a level in place.

        Does nothing when the index has a single level,
        as an index must always have at least one level.
        """
        if self.num_levels <= 1:
            return
        self.check_level(level)
        del self.levels[level]
        self.update_name_map()

    def copy(self) -> Self:
        return self.__class__(*(level.copy() for level in self.levels))

    def equals(self, other: "Index") -> bool:
        return (
            isinstance(other, self.__class__)
            and self.num_levels == other.num_levels
            and self.name_map == other.name_map
            and all(lvl.equals(other_lvl) for lvl, other_lvl in zip(self.levels, other.levels))
        )
