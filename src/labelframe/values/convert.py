"""Total conversions between kinds.

Each converter receives a non null python value of any
supported kind and returns the equivalent value in the target
kind, or ``None`` when the value has no meaningful
representation in the target kind. Converters never raise,
an unconvertible value simply becomes a null.

The rules are:

* numeric to Float or Int is a direct cast, strings are parsed.
* anything to Bool is ``value != 0`` for numbers and ``True`` otherwise.
* Int to DateTime is interpreted as nanoseconds since the unix epoch,
  truncated to whole seconds, in UTC.
* DateTime to numeric is the number of nanoseconds since the unix epoch.
* anything to String uses ``str()``.
"""

import datetime
import math
import numbers
from typing import Any, Callable

from dateutil import parser as dateutil_parser

from ..kinds import Kind

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
ZERO_DATETIME = datetime.datetime(1, 1, 1, tzinfo=datetime.timezone.utc)

# Fields missing from a parsed string are taken from here, not from today.
PARSE_DEFAULT = EPOCH.replace(tzinfo=None)

_NANOSECONDS = 10**9


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Make a datetime timezone aware in UTC, naive datetimes are assumed UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def nanoseconds_to_datetime(value: int) -> datetime.datetime | None:
    # Truncate towards zero, like an integer division in C would.
    seconds = abs(value) // _NANOSECONDS
    if value < 0:
        seconds = -seconds
    try:
        return EPOCH + datetime.timedelta(seconds=seconds)
    except OverflowError:
        return None


def datetime_to_nanoseconds(value: datetime.datetime) -> int:
    delta = as_utc(value) - EPOCH
    return (delta.days * 86400 + delta.seconds) * _NANOSECONDS + delta.microseconds * 1000


def to_float(value: Any) -> float | None:
    if isinstance(value, datetime.datetime):
        return float(datetime_to_nanoseconds(value))
    try:
        if isinstance(value, (numbers.Real, str)):
            result = float(value)
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return None if math.isnan(result) else result


def to_int(value: Any) -> int | None:
    if isinstance(value, datetime.datetime):
        result = datetime_to_nanoseconds(value)
    elif isinstance(value, numbers.Integral):
        result = int(value)
    elif isinstance(value, numbers.Real):
        if not math.isfinite(value):
            return None
        result = int(value)
    elif isinstance(value, str):
        try:
            result = int(value)
        except ValueError:
            return None
    else:
        return None
    if INT64_MIN <= result <= INT64_MAX:
        return result
    return None


def to_string(value: Any) -> str:
    return str(value)


def to_bool(value: Any) -> bool:
    if isinstance(value, numbers.Number):
        return value != 0
    return True


def to_datetime(value: Any) -> datetime.datetime | None:
    if isinstance(value, datetime.datetime):
        return as_utc(value)
    elif isinstance(value, bool):
        return None
    elif isinstance(value, numbers.Integral):
        return nanoseconds_to_datetime(int(value))
    elif isinstance(value, numbers.Real):
        if not math.isfinite(value):
            return None
        return nanoseconds_to_datetime(int(value))
    elif isinstance(value, str):
        try:
            return as_utc(dateutil_parser.parse(value, default=PARSE_DEFAULT))
        except (ValueError, OverflowError):
            return None
    return None


def to_generic(value: Any) -> Any:
    return value


CONVERTERS: dict[Kind, Callable[[Any], Any]] = {
    Kind.FLOAT: to_float,
    Kind.INT: to_int,
    Kind.STRING: to_string,
    Kind.BOOL: to_bool,
    Kind.DATETIME: to_datetime,
    Kind.GENERIC: to_generic,
}
