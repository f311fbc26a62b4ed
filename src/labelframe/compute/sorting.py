"""Stable sorting of values.

Sorting a Series or an index level requires
the positions that would sort its values,
those are then used to reorder the values
and every level of the index in one step.

Sorting is always stable, elements that compare equal
retain their original relative order, both in ascending
and descending order. Nulls are always placed at the end.
"""

import datetime
import numbers
from typing import Any, Self

import pyarrow as pa
import pyarrow.compute as pc


def sort_arrow_indices(array: pa.Array, ascending: bool = True) -> list[int]:
    """Positions that sort an arrow array.

    >>> import pyarrow as pa
    >>> sort_arrow_indices(pa.array([3, None, 1, 2]))
    [2, 3, 0, 1]
    """
    order = "ascending" if ascending else "descending"
    indices = pc.array_sort_indices(array, order=order, null_placement="at_end")
    return indices.to_pylist()


def sort_python_indices(
    values: list[Any], nulls: list[bool], ascending: bool = True
) -> list[int]:
    """Positions that sort a list of heterogeneous python values.

    Values of different types are sorted by :class:`SortKey`.

    >>> sort_python_indices(["b", 1, "a", None], [False, False, False, True])
    [1, 2, 0, 3]
    """
    valid = [pos for pos, null in enumerate(nulls) if not null]
    # sorted() is stable even when reverse=True
    ordered = sorted(valid, key=lambda pos: SortKey(values[pos]), reverse=not ascending)
    return ordered + [pos for pos, null in enumerate(nulls) if null]


class SortKey:
    """Makes heterogeneous python values sortable.

    Values are first ordered by their type, booleans first,
    then numbers, datetimes and finally strings. Values of the
    same type are compared using their natural ordering.
    """

    def __init__(self, value: Any) -> None:
        """
        :param value: The python value to compare.
        """
        self.rank = self.get_rank(value)
        self.value = value

    @classmethod
    def get_rank(cls, value: Any) -> int:
        if isinstance(value, bool):
            return 0
        elif isinstance(value, numbers.Real):
            return 1
        elif isinstance(value, datetime.datetime):
            return 2
        return 3

    def __lt__(self, other: Self) -> bool:
        if self.rank != other.rank:
            return self.rank < other.rank
        if self.rank == 3:
            return str(self.value) < str(other.value)
        return self.value < other.value
