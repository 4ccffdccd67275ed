"""Tagged value handles stored in and returned by a JsonContext."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
_UINT64_MASK = (1 << 64) - 1


class JsonType(Enum):
    """Tag of a JsonValue."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    NULL = "null"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


COMPOSITE_TYPES = frozenset({JsonType.STRING, JsonType.OBJECT, JsonType.ARRAY})

ValueData: TypeAlias = int | float | bool | None


@dataclass(frozen=True, slots=True)
class JsonValue:
    """
    Lightweight handle for one JSON value.

    Scalars carry their data inline. Strings, objects and arrays carry only
    the id of their entry in the owning context, so copying a handle never
    copies the content behind it.
    """

    kind: JsonType
    data: ValueData = None

    @property
    def is_composite(self) -> bool:
        return self.kind in COMPOSITE_TYPES


def wrap_int64(value: int) -> int:
    """Reinterprets an arbitrary integer as two's complement signed 64-bit."""
    value &= _UINT64_MASK
    return value - (1 << 64) if value > INT64_MAX else value
