"""
Id-indexed arena that owns every object, array and string of one document.

Composite values live in three tables keyed by integer ids. Callers only
ever hold JsonValue handles, so the document is a tree of ids rather than a
graph of Python references. Ids come from per-table counters that only grow;
an id is never handed out twice by the same context.
"""

import logging
from collections.abc import Iterator

from ._config import EncodeConfig
from ._errors import EmptyArrayError
from ._errors import IndexOutOfRangeError
from ._errors import KeyNotFoundError
from ._errors import TypeMismatchError
from ._errors import UnknownIdError
from ._serializer import JsonSerializer
from ._values import JsonType
from ._values import JsonValue
from ._values import wrap_int64

logger = logging.getLogger(__name__)

ObjectTable = dict[str, JsonValue]
ArrayTable = list[JsonValue]


class JsonContext:
    """
    Owns a complete in-memory JSON document.

    The root container always has id 0 and is either an object
    (root_object=True) or an array. Values are allocated by the new_*
    constructors, attached with set/push/insert and released, together with
    everything they own, when erased or overwritten.

    A context is not thread-safe; hosts sharing one across threads must
    serialize access themselves.
    """

    def __init__(self, root_object: bool = True) -> None:
        self.root_object = root_object
        self.root_id = 0

        self._objects: dict[int, ObjectTable] = {}
        self._arrays: dict[int, ArrayTable] = {}
        self._strings: dict[int, str] = {}

        self._next_object_id = 0
        self._next_array_id = 0
        self._next_string_id = 0

        if root_object:
            self.new_object()
        else:
            self.new_array()

    def __repr__(self) -> str:
        root = "object" if self.root_object else "array"
        return (
            f"JsonContext(root={root}, objects={len(self._objects)}, "
            f"arrays={len(self._arrays)}, strings={len(self._strings)})"
        )

    @property
    def root(self) -> JsonValue:
        """Handle of the root container."""
        kind = JsonType.OBJECT if self.root_object else JsonType.ARRAY
        return JsonValue(kind, self.root_id)

    # Constructors

    def new_object(self) -> tuple[JsonValue, int]:
        object_id = self._next_object_id
        self._next_object_id += 1
        self._objects[object_id] = {}
        return JsonValue(JsonType.OBJECT, object_id), object_id

    def new_array(self) -> tuple[JsonValue, int]:
        array_id = self._next_array_id
        self._next_array_id += 1
        self._arrays[array_id] = []
        return JsonValue(JsonType.ARRAY, array_id), array_id

    def new_string(self, text: str) -> JsonValue:
        if not isinstance(text, str):
            raise TypeMismatchError(
                f"expected str text, got {type(text).__name__}"
            )
        string_id = self._next_string_id
        self._next_string_id += 1
        self._strings[string_id] = text
        return JsonValue(JsonType.STRING, string_id)

    def new_int(self, value: int) -> JsonValue:
        """Integer handle; values outside int64 wrap like parsed literals."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatchError(
                f"expected int value, got {type(value).__name__}"
            )
        return JsonValue(JsonType.INT, wrap_int64(value))

    def new_float(self, value: float) -> JsonValue:
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeMismatchError(
                f"expected float value, got {type(value).__name__}"
            )
        try:
            number = float(value)
        except OverflowError:
            raise TypeMismatchError(
                f"int value {value} is too large for a float"
            ) from None
        return JsonValue(JsonType.FLOAT, number)

    def new_bool(self, value: bool) -> JsonValue:
        if not isinstance(value, bool):
            raise TypeMismatchError(
                f"expected bool value, got {type(value).__name__}"
            )
        return JsonValue(JsonType.BOOL, value)

    def new_null(self) -> JsonValue:
        return JsonValue(JsonType.NULL)

    # Table lookups

    def _object_table(self, object_id: int) -> ObjectTable:
        table = self._objects.get(object_id)
        if table is None:
            raise UnknownIdError(f"object id {object_id!r} does not exist")
        return table

    def _array_table(self, array_id: int) -> ArrayTable:
        table = self._arrays.get(array_id)
        if table is None:
            raise UnknownIdError(f"array id {array_id!r} does not exist")
        return table

    def _check_value(self, value: JsonValue) -> None:
        """Rejects non-handles and composite handles whose id was released."""
        if not isinstance(value, JsonValue):
            raise TypeMismatchError(
                f"expected JsonValue, got {type(value).__name__}"
            )
        if value.kind is JsonType.OBJECT:
            self._object_table(value.data)  # type: ignore[arg-type]
        elif value.kind is JsonType.ARRAY:
            self._array_table(value.data)  # type: ignore[arg-type]
        elif value.kind is JsonType.STRING and value.data not in self._strings:
            raise UnknownIdError(f"string id {value.data!r} does not exist")

    def object_ids(self) -> list[int]:
        return list(self._objects)

    def array_ids(self) -> list[int]:
        return list(self._arrays)

    def string_ids(self) -> list[int]:
        return list(self._strings)

    # Object operations

    def set(self, object_id: int, key: str, value: JsonValue) -> None:
        """
        Binds key to value, appending it at the end of the key order.

        An existing binding is removed first and its old value released, so
        overwriting always moves the key to the end. When value is itself
        owned by the old value it is detached and survives the release.
        """
        table = self._object_table(object_id)
        if not isinstance(key, str):
            raise TypeMismatchError(
                f"object keys must be str, not {type(key).__name__}"
            )
        self._check_value(value)

        previous = table.pop(key, None)
        if previous is not None and previous != value:
            self._release(previous, keep=value)
        table[key] = value

    def get(self, object_id: int, key: str) -> JsonValue:
        table = self._object_table(object_id)
        try:
            return table[key]
        except KeyError:
            raise KeyNotFoundError(
                f"key {key!r} does not exist in object {object_id}"
            ) from None

    def erase(self, object_id: int, key: str) -> None:
        """Removes key and releases the value bound to it."""
        table = self._object_table(object_id)
        try:
            value = table.pop(key)
        except KeyError:
            raise KeyNotFoundError(
                f"cannot erase key {key!r}: not in object {object_id}"
            ) from None
        self.release(value)

    def contains(self, object_id: int, key: str) -> bool:
        return key in self._object_table(object_id)

    def is_null(self, object_id: int, key: str) -> bool:
        return self.get(object_id, key).kind is JsonType.NULL

    def keys(self, object_id: int) -> list[str]:
        return list(self._object_table(object_id))

    def items(self, object_id: int) -> list[tuple[str, JsonValue]]:
        return list(self._object_table(object_id).items())

    def object_len(self, object_id: int) -> int:
        return len(self._object_table(object_id))

    # Array operations

    def _check_index(self, table: ArrayTable, index: int, op: str) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeMismatchError(
                f"array index must be int, not {type(index).__name__}"
            )
        if index < 0 or index >= len(table):
            raise IndexOutOfRangeError(
                f"index {index} out of range for length {len(table)} [{op}]"
            )

    def push(self, array_id: int, value: JsonValue) -> None:
        table = self._array_table(array_id)
        self._check_value(value)
        table.append(value)

    def insert(self, array_id: int, index: int, value: JsonValue) -> None:
        """Inserts value before the element currently at index."""
        table = self._array_table(array_id)
        self._check_index(table, index, "insert")
        self._check_value(value)
        table.insert(index, value)

    def remove(self, array_id: int, index: int) -> JsonValue:
        """Detaches and returns the element at index without releasing it."""
        table = self._array_table(array_id)
        self._check_index(table, index, "remove")
        return table.pop(index)

    def pop(self, array_id: int) -> JsonValue:
        table = self._array_table(array_id)
        if not table:
            raise EmptyArrayError(f"array {array_id} is empty [pop]")
        return table.pop()

    def top(self, array_id: int) -> JsonValue:
        table = self._array_table(array_id)
        if not table:
            raise EmptyArrayError(f"array {array_id} is empty [top]")
        return table[-1]

    def at(self, array_id: int, index: int) -> JsonValue:
        table = self._array_table(array_id)
        self._check_index(table, index, "at")
        return table[index]

    def values(self, array_id: int) -> list[JsonValue]:
        return list(self._array_table(array_id))

    def array_len(self, array_id: int) -> int:
        return len(self._array_table(array_id))

    # Release

    def release(self, value: JsonValue) -> None:
        """
        Drops value and everything it transitively owns from the tables.

        Scalars own nothing. Ids already missing from their table are
        skipped, which also keeps a caller-made cycle from looping forever.
        """
        if not isinstance(value, JsonValue):
            raise TypeMismatchError(
                f"expected JsonValue, got {type(value).__name__}"
            )
        if value == self.root:
            raise ValueError("the root container cannot be released")
        self._release(value)

    def _release(
        self, value: JsonValue, keep: JsonValue | None = None
    ) -> None:
        """Cascading release that leaves keep and its subtree in place."""
        released = 0
        pending = [value]
        while pending:
            current = pending.pop()
            if current == keep:
                continue
            if current.kind is JsonType.STRING:
                if self._strings.pop(current.data, None) is not None:  # type: ignore[arg-type]
                    released += 1
            elif current.kind is JsonType.OBJECT:
                members = self._objects.pop(current.data, None)  # type: ignore[arg-type]
                if members is not None:
                    released += 1
                    pending.extend(members.values())
            elif current.kind is JsonType.ARRAY:
                elements = self._arrays.pop(current.data, None)  # type: ignore[arg-type]
                if elements is not None:
                    released += 1
                    pending.extend(elements)

        if released > 1:
            logger.debug("released %d table entries", released)

    # Typed readers

    def _expect(self, value: JsonValue, kind: JsonType) -> None:
        if not isinstance(value, JsonValue):
            raise TypeMismatchError(
                f"expected {kind.value} value, got {type(value).__name__}"
            )
        if value.kind is not kind:
            raise TypeMismatchError(
                f"expected {kind.value} value, got {value.kind.value}"
            )

    def as_int(self, value: JsonValue) -> int:
        self._expect(value, JsonType.INT)
        return value.data  # type: ignore[return-value]

    def as_float(self, value: JsonValue) -> float:
        self._expect(value, JsonType.FLOAT)
        return value.data  # type: ignore[return-value]

    def as_bool(self, value: JsonValue) -> bool:
        self._expect(value, JsonType.BOOL)
        return value.data  # type: ignore[return-value]

    def as_string(self, value: JsonValue) -> str:
        self._expect(value, JsonType.STRING)
        try:
            return self._strings[value.data]  # type: ignore[index]
        except KeyError:
            raise UnknownIdError(
                f"string id {value.data!r} does not exist"
            ) from None

    def as_object(self, value: JsonValue) -> int:
        """Returns the object id behind value."""
        self._expect(value, JsonType.OBJECT)
        self._check_value(value)
        return value.data  # type: ignore[return-value]

    def as_array(self, value: JsonValue) -> int:
        """Returns the array id behind value."""
        self._expect(value, JsonType.ARRAY)
        self._check_value(value)
        return value.data  # type: ignore[return-value]

    # Traversal support for the serializer

    def _iter_members(self, object_id: int) -> Iterator[tuple[str, JsonValue]]:
        return iter(self._object_table(object_id).items())

    def _iter_elements(self, array_id: int) -> Iterator[JsonValue]:
        return iter(self._array_table(array_id))

    # Serialization

    def serialize(self, value: JsonValue, pretty: bool = False) -> str:
        """Renders value, and everything it owns, as strict JSON text."""
        self._check_value(value)
        serializer = JsonSerializer(self, EncodeConfig(pretty=pretty))
        return serializer.serialize(value)

    def to_text(self, pretty: bool = False) -> str:
        """Renders the whole document starting at the root container."""
        return self.serialize(self.root, pretty)
