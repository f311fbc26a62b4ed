"""Deep equality of labelframe objects."""

from typing import Any

from .dataframe import DataFrame
from .index import Index
from .series import Series
from .values import Values


def equal(a: Any, b: Any) -> bool:
    """If two Series, DataFrames, indices or values are deeply equal.

    Objects of different types are never equal.

    >>> from labelframe import Series
    >>> equal(Series([1, 2]), Series([1, 2]))
    True
    >>> equal(Series([1, 2]), Series([1.0, 2.0]))
    False
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, (Series, DataFrame, Index, Values)):
        return a.equals(b)
    return a == b
