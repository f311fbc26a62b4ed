"""Nullable storage for the values of a column.

Every Series stores its data, and every index level stores its labels,
in a :class:`Values` object. Values hold elements of a single :class:`labelframe.Kind`,
each element being a ``(value, null)`` pair.

The kinds are:

* **Float**, stored as ``float64``, ``nan`` is a null.
* **Int**, stored as ``int64``.
* **String**, a null string is distinct from an empty string.
* **Bool**
* **DateTime**, instants in time in UTC.
* **Generic**, any mix of the other kinds stored as python objects.

Values of any kind can be converted to any other kind,
conversions never fail: values that have no representation
in the target kind become nulls.

>>> from labelframe.kinds import Kind
>>> values = values_from(["1.5", "hello", None])
>>> values.convert(Kind.FLOAT).to_pylist()
[1.5, None, None]
"""

from .arrow import (
    ArrowValues,
    BoolValues,
    DateTimeValues,
    FloatValues,
    IntValues,
    StringValues,
)
from .base import NULL_STRING, Element, Values, is_null_input, render
from .factory import default_range, infer_kind, is_scalar, values_from
from .generic import GenericValues

__all__ = (
    "Values",
    "Element",
    "ArrowValues",
    "FloatValues",
    "IntValues",
    "StringValues",
    "BoolValues",
    "DateTimeValues",
    "GenericValues",
    "NULL_STRING",
    "is_null_input",
    "is_scalar",
    "render",
    "values_from",
    "infer_kind",
    "default_range",
)
