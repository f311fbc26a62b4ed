"""Build Values out of raw input data.

Values can be built from a single scalar, from a sequence
of python values or from an Arrow array.

When building from python values the narrowest kind
able to hold all of them is detected, nulls are ignored
for the purpose of detecting the kind:

>>> values_from([1, 2, None]).kind
<Kind.INT: 'int'>
>>> values_from([1, 2.5]).kind
<Kind.FLOAT: 'float'>
>>> values_from([1, "a"]).kind
<Kind.GENERIC: 'generic'>
"""

import datetime
import logging
import numbers
from typing import Any

import pyarrow as pa

from ..errors import ConstructionError
from ..kinds import Kind
from .arrow import IntValues
from .base import Values, is_null_input
from .generic import GenericValues

logger = logging.getLogger(__name__)


def scalar_kind(value: Any) -> Kind:
    """Detect the kind of a single non null python value."""
    if isinstance(value, bool):
        return Kind.BOOL
    elif isinstance(value, numbers.Integral):
        return Kind.INT
    elif isinstance(value, numbers.Real):
        return Kind.FLOAT
    elif isinstance(value, str):
        return Kind.STRING
    elif isinstance(value, datetime.datetime):
        return Kind.DATETIME
    raise ConstructionError(f"unsupported value type: {type(value).__name__}")


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, GenericValues.SUPPORTED_TYPES)


def infer_kind(items: list[Any]) -> Kind:
    """Detect the narrowest kind able to represent all the items."""
    kinds = {scalar_kind(item) for item in items if not is_null_input(item)}
    if len(kinds) == 1:
        return kinds.pop()
    if kinds == {Kind.INT, Kind.FLOAT}:
        return Kind.FLOAT
    if kinds:
        logger.debug("mixed value types %s, falling back to generic kind", sorted(map(str, kinds)))
    return Kind.GENERIC


def values_from(data: Any) -> Values:
    """Build new Values from raw data.

    :param data: A scalar, a list or tuple of scalars, an Arrow array
                 or existing Values (which get copied).
    """
    if isinstance(data, Values):
        return data.copy()
    if isinstance(data, (pa.Array, pa.ChunkedArray)):
        return values_from_arrow(data)
    if is_scalar(data):
        data = [data]
    elif isinstance(data, (list, tuple, range)):
        data = list(data)
    else:
        raise ConstructionError(f"unsupported data type: {type(data).__name__}")
    return Values.for_kind(infer_kind(data)).from_pylist(data)


def values_from_arrow(data: pa.Array | pa.ChunkedArray) -> Values:
    if pa.types.is_null(data.type):
        return GenericValues([None] * len(data), [True] * len(data))
    kind = Kind.from_arrow(data.type)
    if kind is None:
        raise ConstructionError(f"unsupported arrow type: {data.type}")
    return Values.for_kind(kind)(data)


def default_range(n: int) -> IntValues:
    """Int values ``0..n-1``, used for default index labels."""
    return IntValues(pa.array(range(n), type=pa.int64()))
