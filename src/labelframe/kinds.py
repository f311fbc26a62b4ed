"""Runtime type tags of the data stored in a column.

Every column of data (and every level of an index) holds values
of one single kind. The kind drives how values are stored,
how nulls are represented and which operations are allowed,
for example only numeric kinds can be aggregated.
"""

import enum

import pyarrow as pa


class Kind(enum.Enum):
    """The kind of the values stored in a column."""

    NONE = "none"
    FLOAT = "float"
    INT = "int"
    STRING = "string"
    BOOL = "bool"
    DATETIME = "datetime"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value

    @property
    def numeric(self) -> bool:
        """If values of this kind can be aggregated."""
        return self in (Kind.FLOAT, Kind.INT)

    @classmethod
    def from_arrow(cls, arrow_type: pa.DataType) -> "Kind | None":
        """Detect the kind matching an Arrow data type.

        Returns ``None`` when the Arrow type has no matching kind.
        """
        if pa.types.is_boolean(arrow_type):
            return cls.BOOL
        elif pa.types.is_integer(arrow_type):
            return cls.INT
        elif pa.types.is_floating(arrow_type):
            return cls.FLOAT
        elif pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
            return cls.STRING
        elif pa.types.is_timestamp(arrow_type):
            return cls.DATETIME
        return None
