"""Construction options for Series and DataFrames.

A :class:`Config` collects all the optional details that can be
provided when building a new :class:`labelframe.Series` or
:class:`labelframe.DataFrame`, like the labels of the index,
the name of the Series or the kind the values should be converted to::

    Series([1, 2, 3], Config(index=["a", "b", "c"], name="letters"))

When no index is provided a default range index ``0..n-1`` is used.
"""

import dataclasses
from typing import Any

from .errors import AmbiguousConfigError, ConstructionError
from .kinds import Kind


@dataclasses.dataclass(frozen=True)
class Config:
    """Options for the Series and DataFrame constructors.

    :param index: Labels of a single level index.
    :param multi_index: One sequence of labels for each level of a multi level index.
    :param index_name: The name of the single level index.
    :param multi_index_names: The names of each level of a multi level index.
    :param cols: Labels of the columns (DataFrame only).
    :param multi_col: One sequence of labels for each column level (DataFrame only).
    :param cols_name: The name of the single column level (DataFrame only).
    :param multi_col_names: The names of each column level (DataFrame only).
    :param name: The name of the Series or DataFrame.
    :param kind: The kind the values must be converted to after construction.
    """

    index: Any = None
    multi_index: list[Any] | None = None
    index_name: str = ""
    multi_index_names: list[str] | None = None
    cols: list[Any] | None = None
    multi_col: list[list[Any]] | None = None
    cols_name: str = ""
    multi_col_names: list[str] | None = None
    name: str = ""
    kind: Kind | str | None = None

    def validate(self) -> None:
        """Detect conflicting options."""
        if self.index is not None and self.multi_index is not None:
            raise AmbiguousConfigError(
                "supplying both index and multi_index is ambiguous; supply one or the other"
            )
        if self.cols is not None and self.multi_col is not None:
            raise AmbiguousConfigError(
                "supplying both cols and multi_col is ambiguous; supply one or the other"
            )
        if self.multi_index is not None and self.multi_index_names is not None:
            if len(self.multi_index_names) != len(self.multi_index):
                raise ConstructionError(
                    f"multi_index_names must have the same length as multi_index: "
                    f"{len(self.multi_index_names)} != {len(self.multi_index)}"
                )
        if self.multi_col is not None and self.multi_col_names is not None:
            if len(self.multi_col_names) != len(self.multi_col):
                raise ConstructionError(
                    f"multi_col_names must have the same length as multi_col: "
                    f"{len(self.multi_col_names)} != {len(self.multi_col)}"
                )

    @property
    def target_kind(self) -> Kind | None:
        """The kind values should be converted to, if any."""
        if self.kind is None:
            return None
        try:
            return Kind(self.kind)
        except ValueError:
            raise ConstructionError(f"unsupported kind: {self.kind}") from None
