"""Interface shared by all the Values implementations."""

import abc
import math
from typing import Any, Iterator, NamedTuple, Self

from ..errors import BoundsError, TypeUnsupportedError
from ..kinds import Kind
from .convert import CONVERTERS

NULL_STRING = "NaN"
"""Marker used when rendering a null value as text."""

_REGISTRY: dict[Kind, type["Values"]] = {}


class Element(NamedTuple):
    """A single value and if it is null."""

    value: Any
    null: bool


def is_null_input(value: Any) -> bool:
    """If the provided python value has to be stored as a null.

    Both ``None`` and a float ``NaN`` are considered nulls
    for any kind of values.
    """
    return value is None or (isinstance(value, float) and math.isnan(value))


def render(value: Any, null: bool = False) -> str:
    """Default text rendering of a value.

    This is the rendering used as the key of label maps,
    thus values of different kinds that render the same way
    (like ``1`` and ``"1"``) are considered the same label.
    """
    if null:
        return NULL_STRING
    return str(value)


class Values(abc.ABC):
    """Nullable storage for values of a single kind.

    Values are an ordered sequence of ``(value, null)`` elements.
    Each subclass provides the storage for one :class:`Kind`
    and registers itself, so that :meth:`Values.for_kind`
    can find the right implementation when converting
    or building values of a given kind.

    The structural operations (:meth:`take`, :meth:`insert`,
    :meth:`drop`, :meth:`swap` and :meth:`less`) are what
    Series and index levels rely on to select, modify and sort
    their data.
    """

    kind: Kind
    null_value: Any = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" in cls.__dict__:
            _REGISTRY[cls.kind] = cls

    @staticmethod
    def for_kind(kind: Kind) -> type["Values"]:
        """Get the Values implementation for a kind."""
        try:
            return _REGISTRY[kind]
        except KeyError:
            raise TypeUnsupportedError(f"no values storage for kind: {kind}") from None

    @classmethod
    @abc.abstractmethod
    def coerce(cls, value: Any) -> Any:
        """Adapt a python value to the representation stored by this kind.

        Returns ``None`` for null values and raises
        :class:`labelframe.errors.TypeMismatchError` when the value
        can't be represented.
        """
        ...

    @classmethod
    @abc.abstractmethod
    def from_pylist(cls, values: list[Any]) -> Self:
        """Build the values from a list of python objects."""
        ...

    @abc.abstractmethod
    def __len__(self) -> int: ...

    @abc.abstractmethod
    def element(self, pos: int) -> Element:
        """The value at the given position and if it is null.

        Null elements report the placeholder of the kind as their value.
        """
        ...

    @abc.abstractmethod
    def take(self, positions: list[int]) -> Self:
        """New values with the elements at the given positions.

        The positions can be in any order and can be repeated,
        the result follows the order of the positions.
        """
        ...

    @abc.abstractmethod
    def insert(self, pos: int, value: Any) -> None:
        """Insert a value before ``pos``, ``pos == len(self)`` appends."""
        ...

    @abc.abstractmethod
    def drop(self, pos: int) -> None:
        """Remove the value at ``pos``."""
        ...

    @abc.abstractmethod
    def extend(self, other: "Values") -> None:
        """Append all the elements of other values of the same kind."""
        ...

    @abc.abstractmethod
    def swap(self, i: int, j: int) -> None: ...

    @abc.abstractmethod
    def less(self, i: int, j: int) -> bool:
        """If the element at ``i`` sorts before the element at ``j``.

        Null elements sort after any valid element.
        """
        ...

    @abc.abstractmethod
    def sort_indices(self, ascending: bool = True) -> list[int]:
        """Positions that sort the values, stable and with nulls last."""
        ...

    @abc.abstractmethod
    def copy(self) -> Self: ...

    @abc.abstractmethod
    def to_pylist(self) -> list[Any]:
        """Values as python objects, nulls are reported as ``None``."""
        ...

    @abc.abstractmethod
    def to_arrow(self) -> Any: ...

    def __iter__(self) -> Iterator[Element]:
        for pos in range(len(self)):
            yield self.element(pos)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_pylist()})"

    def check_position(self, pos: int, upper: int | None = None) -> None:
        """Ensure ``0 <= pos <= upper``, upper defaults to the last position."""
        if upper is None:
            upper = len(self) - 1
        if not isinstance(pos, int) or pos < 0 or pos > upper:
            raise BoundsError(f"invalid position: {pos} (max {upper})")

    def check_positions(self, positions: list[int]) -> None:
        for pos in positions:
            self.check_position(pos)

    def valid(self) -> list[int]:
        """Positions of the non null elements."""
        return [pos for pos, (_, null) in enumerate(self) if not null]

    def null(self) -> list[int]:
        """Positions of the null elements."""
        return [pos for pos, (_, null) in enumerate(self) if null]

    def convert(self, kind: Kind) -> "Values":
        """Convert the values to another kind.

        Conversion never fails, elements that can't
        be converted become nulls of the target kind.
        """
        target = Values.for_kind(kind)
        if kind is self.kind:
            return self.copy()
        converter = CONVERTERS[kind]
        return target.from_pylist(
            [None if null else converter(value) for value, null in self]
        )

    def equals(self, other: "Values") -> bool:
        """If both values have the same kind and elements.

        Nulls are equal to each other regardless of their placeholder.
        """
        if self.kind is not other.kind or len(self) != len(other):
            return False
        for (v1, null1), (v2, null2) in zip(self, other):
            if null1 != null2:
                return False
            if not null1 and v1 != v2:
                return False
        return True
