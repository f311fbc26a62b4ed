"""Values of mixed types.

When the data provided contains values of different types,
like numbers and strings together, they are stored as plain
python objects in the Generic kind. Generic values can't be
stored in an Arrow array, so they are kept in a python list
together with a list of null flags.
"""

import datetime
import numbers
from typing import Any, Self

import pyarrow as pa

from ..compute.sorting import SortKey, sort_python_indices
from ..errors import ConstructionError, TypeMismatchError
from ..kinds import Kind
from .base import Element, Values, is_null_input, render


class GenericValues(Values):
    """Python objects of any supported scalar type."""

    kind = Kind.GENERIC
    null_value = None

    SUPPORTED_TYPES = (bool, numbers.Real, str, datetime.datetime)

    def __init__(self, data: list[Any] | None = None, nulls: list[bool] | None = None) -> None:
        """
        :param data: The python values.
        :param nulls: If each of the values is a null, must have the same length of data.
        """
        self.data = list(data or [])
        self.nulls = list(nulls) if nulls is not None else [False] * len(self.data)
        if len(self.nulls) != len(self.data):
            raise ConstructionError("data and nulls must have the same length")

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if is_null_input(value):
            return None
        if isinstance(value, cls.SUPPORTED_TYPES):
            return value
        raise TypeMismatchError(f"{value!r} is not a valid {cls.kind} value")

    @classmethod
    def from_pylist(cls, values: list[Any]) -> Self:
        try:
            coerced = [cls.coerce(value) for value in values]
        except TypeMismatchError as e:
            raise ConstructionError(str(e)) from e
        return cls(coerced, [value is None for value in coerced])

    def __len__(self) -> int:
        return len(self.data)

    def element(self, pos: int) -> Element:
        self.check_position(pos)
        if self.nulls[pos]:
            return Element(self.null_value, True)
        return Element(self.data[pos], False)

    def take(self, positions: list[int]) -> Self:
        positions = list(positions)
        self.check_positions(positions)
        return self.__class__(
            [self.data[pos] for pos in positions],
            [self.nulls[pos] for pos in positions],
        )

    def insert(self, pos: int, value: Any) -> None:
        self.check_position(pos, len(self))
        value = self.coerce(value)
        self.data.insert(pos, value)
        self.nulls.insert(pos, value is None)

    def drop(self, pos: int) -> None:
        self.check_position(pos)
        del self.data[pos]
        del self.nulls[pos]

    def extend(self, other: Values) -> None:
        if other.kind is not self.kind:
            raise TypeMismatchError(f"unable to extend {self.kind} values with {other.kind}")
        for value, null in other:
            self.data.append(value)
            self.nulls.append(null)

    def swap(self, i: int, j: int) -> None:
        self.check_position(i)
        self.check_position(j)
        self.data[i], self.data[j] = self.data[j], self.data[i]
        self.nulls[i], self.nulls[j] = self.nulls[j], self.nulls[i]

    def less(self, i: int, j: int) -> bool:
        if self.nulls[i]:
            return False
        if self.nulls[j]:
            return True
        return SortKey(self.data[i]) < SortKey(self.data[j])

    def sort_indices(self, ascending: bool = True) -> list[int]:
        return sort_python_indices(self.data, self.nulls, ascending)

    def copy(self) -> Self:
        return self.__class__(self.data, self.nulls)

    def to_pylist(self) -> list[Any]:
        return [None if null else value for value, null in zip(self.data, self.nulls)]

    def to_arrow(self) -> pa.Array:
        """Generic values are exported to arrow as their text rendering."""
        return pa.array(
            [None if null else render(value) for value, null in zip(self.data, self.nulls)],
            type=pa.string(),
        )
