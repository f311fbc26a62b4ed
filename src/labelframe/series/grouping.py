"""Group the rows of a Series by their index labels.

Grouping partitions the rows of a Series so that rows
sharing the same labels on every index level end up
in the same group. Each group can then be aggregated
separately, for example given::

    city         shop
    New York     Shop A    10
    Los Angeles  Shop C     8
    New York     Shop A    15

Grouping by index and computing the sum of each group leads to::

    Los Angeles  Shop C     8.0
    New York     Shop A    25.0

Groups are identified by a key made of the text rendering
of the labels of each level joined by a space, the aggregated
results are always sorted by that key.
"""

import dataclasses
import logging
from typing import Any, Callable

from ..errors import LabelNotFoundError, TypeUnsupportedError
from ..index import Index, Level
from ..kinds import Kind
from ..values import Values, render
from .series import Series

logger = logging.getLogger(__name__)

KEY_SEPARATOR = " "


@dataclasses.dataclass
class Group:
    """The rows belonging to a group.

    :param positions: The positions of the rows of the group in the original Series.
    :param labels: The labels of the group, one for each index level.
    """

    positions: list[int] = dataclasses.field(default_factory=list)
    labels: list[Any] = dataclasses.field(default_factory=list)

    @property
    def representative(self) -> int:
        """Position of the row whose labels represent the group."""
        return self.positions[0]


class Grouping:
    """A Series partitioned by its index labels.

    >>> from labelframe import Config
    >>> s = Series([1, 2, 3], Config(index=["b", "a", "b"]))
    >>> grouping = s.group_by_index()
    >>> grouping.groups()
    ['a', 'b']
    >>> grouping.sum().to_pylist()
    [2.0, 4.0]
    """

    def __init__(self, series: Series) -> None:
        """
        :param series: The Series to group, grouping does not modify it.
        """
        series.ensure_alignment()
        self.series = series
        self._groups: dict[str, Group] = {}
        levels = series.index.levels
        for pos in range(len(series)):
            labels = [level.labels.element(pos) for level in levels]
            key = KEY_SEPARATOR.join(render(value, null) for value, null in labels)
            group = self._groups.get(key)
            if group is None:
                group = self._groups[key] = Group(
                    labels=[None if null else value for value, null in labels]
                )
            group.positions.append(pos)
        logger.debug("grouped %d rows into %d groups", len(series), len(self._groups))

    def __len__(self) -> int:
        return len(self._groups)

    def groups(self) -> list[str]:
        """The keys of all the groups, sorted."""
        return sorted(self._groups)

    def positions(self, key: str) -> list[int]:
        """The positions of the rows of a group in the original Series."""
        return list(self._get(key).positions)

    def group(self, key: str) -> Series:
        """The rows of a group as a new Series."""
        return self.series.subset(self._get(key).positions)

    def _get(self, key: str) -> Group:
        try:
            return self._groups[key]
        except KeyError:
            raise LabelNotFoundError(key) from None

    def aggregate(self, method: Callable[[Series], Any], kind: Kind = Kind.FLOAT) -> Series:
        """Aggregate each group and concatenate the results.

        Groups are aggregated in the order of their keys, each
        result is labeled with the index labels of its group.

        :param method: Computes the aggregated value of the Series of a group.
        :param kind: The kind of the aggregated values.
        """
        if not self.series.kind.numeric:
            raise TypeUnsupportedError(
                f"aggregation is not supported for {self.series.kind} values"
            )
        result = Series()
        for key in self.groups():
            group = self._groups[key]
            value = method(self.series.subset(group.positions))
            index = Index(
                *(
                    Level(level.labels.take([group.representative]), level.name)
                    for level in self.series.index.levels
                )
            )
            row = Series.from_components(Values.for_kind(kind).from_pylist([value]), index)
            result.join(row, inplace=True)
        result.name = self.series.name
        return result

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
