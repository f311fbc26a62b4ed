"""Values of the typed kinds, stored as Arrow arrays.

Float, Int, String, Bool and DateTime values are stored
in a :class:`pyarrow.Array`, which natively tracks null
values through its validity bitmap. Arrow arrays are immutable,
so every mutation replaces the array with a new one and
two Values can never share a mutable storage.

Each kind defines its own placeholder reported for
null elements: Float uses ``nan``, Int ``0``, Bool ``False``,
DateTime the zero instant and String the ``"NaN"`` marker,
which makes a null distinguishable from an empty string.
"""

import datetime
import math
import numbers
from typing import Any, Self

import pyarrow as pa
import pyarrow.compute as pc

from ..compute.sorting import sort_arrow_indices
from ..errors import ConstructionError, TypeMismatchError
from ..kinds import Kind
from .base import NULL_STRING, Element, Values, is_null_input
from .convert import INT64_MAX, INT64_MIN, ZERO_DATETIME, as_utc


class ArrowValues(Values):
    """Base class for the values stored in an Arrow array."""

    arrow_type: pa.DataType

    def __init__(self, data: pa.Array | pa.ChunkedArray | None = None) -> None:
        """
        :param data: The arrow array holding the values,
                     it will be cast to the arrow type of the kind when needed.
        """
        if data is None:
            data = pa.array([], type=self.arrow_type)
        elif isinstance(data, pa.ChunkedArray):
            data = data.combine_chunks()
        if data.type != self.arrow_type:
            try:
                data = self._cast(data)
            except (pa.ArrowInvalid, pa.ArrowNotImplementedError) as e:
                raise ConstructionError(
                    f"unable to store {data.type} data as {self.kind}: {e}"
                ) from e
        self.data = data

    def _cast(self, data: pa.Array) -> pa.Array:
        return data.cast(self.arrow_type)

    def _as_py(self, value: Any) -> Any:
        return value

    @classmethod
    def from_pylist(cls, values: list[Any]) -> Self:
        try:
            coerced = [cls.coerce(value) for value in values]
        except TypeMismatchError as e:
            raise ConstructionError(str(e)) from e
        return cls(pa.array(coerced, type=cls.arrow_type))

    def __len__(self) -> int:
        return len(self.data)

    def element(self, pos: int) -> Element:
        self.check_position(pos)
        scalar = self.data[pos]
        if not scalar.is_valid:
            return Element(self.null_value, True)
        return Element(self._as_py(scalar.as_py()), False)

    def take(self, positions: list[int]) -> Self:
        positions = list(positions)
        self.check_positions(positions)
        return self.__class__(self.data.take(pa.array(positions, type=pa.int64())))

    def insert(self, pos: int, value: Any) -> None:
        self.check_position(pos, len(self))
        item = pa.array([self.coerce(value)], type=self.arrow_type)
        self.data = pa.concat_arrays(
            [self.data.slice(0, pos), item, self.data.slice(pos)]
        )

    def drop(self, pos: int) -> None:
        self.check_position(pos)
        self.data = pa.concat_arrays(
            [self.data.slice(0, pos), self.data.slice(pos + 1)]
        )

    def extend(self, other: Values) -> None:
        if other.kind is not self.kind:
            raise TypeMismatchError(f"unable to extend {self.kind} values with {other.kind}")
        self.data = pa.concat_arrays([self.data, other.to_arrow()])

    def swap(self, i: int, j: int) -> None:
        self.check_position(i)
        self.check_position(j)
        order = list(range(len(self)))
        order[i], order[j] = order[j], order[i]
        self.data = self.data.take(pa.array(order, type=pa.int64()))

    def less(self, i: int, j: int) -> bool:
        left, right = self.element(i), self.element(j)
        if left.null:
            return False
        if right.null:
            return True
        return left.value < right.value

    def sort_indices(self, ascending: bool = True) -> list[int]:
        return sort_arrow_indices(self.data, ascending)

    def copy(self) -> Self:
        return self.__class__(self.data)

    def to_pylist(self) -> list[Any]:
        return [
            None if value is None else self._as_py(value)
            for value in self.data.to_pylist()
        ]

    def to_arrow(self) -> pa.Array:
        return self.data


class FloatValues(ArrowValues):
    """Floating point values, ``nan`` is always a null."""

    kind = Kind.FLOAT
    arrow_type = pa.float64()
    null_value = math.nan

    def __init__(self, data: pa.Array | pa.ChunkedArray | None = None) -> None:
        super().__init__(data)
        if self.data.null_count < len(self.data):
            self.data = pc.if_else(
                pc.is_nan(self.data), pa.scalar(None, type=self.arrow_type), self.data
            )

    @classmethod
    def coerce(cls, value: Any) -> float | None:
        if is_null_input(value):
            return None
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return float(value)
        raise TypeMismatchError(f"{value!r} is not a valid {cls.kind} value")


class IntValues(ArrowValues):
    """Integer values in the int64 range."""

    kind = Kind.INT
    arrow_type = pa.int64()
    null_value = 0

    @classmethod
    def coerce(cls, value: Any) -> int | None:
        if is_null_input(value):
            return None
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            value = int(value)
            if INT64_MIN <= value <= INT64_MAX:
                return value
        raise TypeMismatchError(f"{value!r} is not a valid {cls.kind} value")


class StringValues(ArrowValues):
    """Text values, the empty string is a valid value."""

    kind = Kind.STRING
    arrow_type = pa.string()
    null_value = NULL_STRING

    @classmethod
    def coerce(cls, value: Any) -> str | None:
        if is_null_input(value):
            return None
        if isinstance(value, str):
            return value
        raise TypeMismatchError(f"{value!r} is not a valid {cls.kind} value")


class BoolValues(ArrowValues):
    kind = Kind.BOOL
    arrow_type = pa.bool_()
    null_value = False

    @classmethod
    def coerce(cls, value: Any) -> bool | None:
        if is_null_input(value):
            return None
        if isinstance(value, bool):
            return value
        raise TypeMismatchError(f"{value!r} is not a valid {cls.kind} value")


class DateTimeValues(ArrowValues):
    """Instants in time, always in UTC.

    Naive datetimes are assumed to be in UTC,
    timezone aware ones are converted to UTC.
    """

    kind = Kind.DATETIME
    arrow_type = pa.timestamp("us", tz="UTC")
    null_value = ZERO_DATETIME

    def _cast(self, data: pa.Array) -> pa.Array:
        # nanosecond timestamps are truncated to microseconds
        return data.cast(self.arrow_type, safe=False)

    def _as_py(self, value: Any) -> Any:
        return as_utc(value)

    @classmethod
    def coerce(cls, value: Any) -> datetime.datetime | None:
        if is_null_input(value):
            return None
        if isinstance(value, datetime.datetime):
            return as_utc(value)
        raise TypeMismatchError(f"{value!r} is not a valid {cls.kind} value")
