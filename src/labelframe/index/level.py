"""A single axis of labels."""

from typing import Any, Self

from ..errors import LabelNotFoundError
from ..kinds import Kind
from ..values import Values, default_range, is_null_input, render, values_from

LabelMap = dict[str, list[int]]
"""Maps the rendering of a label to the positions where it appears."""


class Level:
    """One level of an index: ordered labels, their kind and a name.

    Along with the labels a Level keeps a ``label_map``
    that allows to quickly find the positions of a label.
    The label map is keyed by the text rendering of the labels,
    so labels of different types that render the same way,
    like ``1`` and ``"1"``, are the same label.

    The label map is not updated automatically,
    whoever modifies the labels directly has to
    call :meth:`refresh` afterwards.

    >>> lvl = Level(["a", "b", "a"], name="letters")
    >>> lvl.label_map
    {'a': [0, 2], 'b': [1]}
    """

    def __init__(self, labels: Any = None, name: str = "") -> None:
        """
        :param labels: The labels, anything accepted by :func:`labelframe.values.values_from`.
        :param name: The name of the level.
        """
        self.labels: Values = values_from([] if labels is None else labels)
        self.name = name
        self.label_map: LabelMap = {}
        self.refresh()

    @classmethod
    def default(cls, n: int, name: str = "") -> Self:
        """A level with range labels ``0..n-1``."""
        return cls(default_range(n), name)

    @property
    def kind(self) -> Kind:
        return self.labels.kind

    def __len__(self) -> int:
        return len(self.labels)

    def __repr__(self) -> str:
        return f"Level(name={self.name!r}, kind={self.kind}, labels={self.labels.to_pylist()})"

    def refresh(self) -> None:
        """Rebuild the label map from the current labels."""
        label_map: LabelMap = {}
        for pos, (value, null) in enumerate(self.labels):
            label_map.setdefault(render(value, null), []).append(pos)
        self.label_map = label_map

    def positions(self, label: Any) -> list[int]:
        """The positions where a label appears."""
        try:
            return list(self.label_map[render(label, is_null_input(label))])
        except KeyError:
            raise LabelNotFoundError(label) from None

    def subset(self, positions: list[int]) -> Self:
        """New level with the labels at the given positions.

        Positions can be repeated and in any order.
        """
        return self.__class__(self.labels.take(positions), self.name)

    def convert(self, kind: Kind) -> Self:
        """New level with the labels converted to another kind."""
        return self.__class__(self.labels.convert(kind), self.name)

    def copy(self) -> Self:
        return self.__class__(self.labels.copy(), self.name)

    def equals(self, other: "Level") -> bool:
        return (
            isinstance(other, Level)
            and self.name == other.name
            and self.labels.equals(other.labels)
            and self.label_map == other.label_map
        )
