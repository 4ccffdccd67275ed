"""
Renders values held by a JsonContext as strict, ASCII-only JSON text.

The walk keeps its own stack of open containers instead of recursing, so
document depth is bounded by memory rather than by the interpreter's
recursion limit.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._config import EncodeConfig
from ._profiling import ProfileContext
from ._values import JsonType
from ._values import JsonValue

if TYPE_CHECKING:
    from ._arena import JsonContext

_ESCAPES = {
    '"': '\\"',
    "'": "\\'",
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\v": "\\v",
    "\r": "\\r",
    "\0": "\\0",
    "\b": "\\b",
    "\f": "\\f",
}

# Printable ASCII is emitted as is; everything else becomes \uXXXX
_CONTROL_LIMIT = 0x20
_ASCII_LIMIT = 0x80
_BMP_LIMIT = 0xFFFF


def encode_string(text: str) -> str:
    """Quotes text, escaping every character outside printable ASCII."""
    result = ['"']
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            result.append(escaped)
            continue

        code = ord(char)
        if _CONTROL_LIMIT <= code < _ASCII_LIMIT:
            result.append(char)
        elif code > _BMP_LIMIT:
            code -= 0x10000
            result.append(f"\\u{0xD800 | (code >> 10):04X}")
            result.append(f"\\u{0xDC00 | (code & 0x3FF):04X}")
        else:
            result.append(f"\\u{code:04X}")
    result.append('"')
    return "".join(result)


def encode_float(value: float) -> str:
    """Shortest decimal text that reads back as the same double."""
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Out of range float values are not JSON compliant")
    return repr(value)


@dataclass(slots=True)
class _OpenContainer:
    """A container whose entries are still being written."""

    ident: tuple[JsonType, int]
    entries: Iterator[tuple[str, JsonValue]] | Iterator[JsonValue]
    closer: str
    depth: int
    written: int = 0


class JsonSerializer:
    """
    Writes one value of a context as compact or pretty text.

    Pretty output places each entry on its own line indented by one
    indent unit per level, and closes containers on their own line at the
    parent's level. Empty containers are always "{}" and "[]".
    """

    def __init__(
        self, context: "JsonContext", config: EncodeConfig | None = None
    ) -> None:
        self.context = context
        self.config = config if config is not None else EncodeConfig()

    def serialize(self, value: JsonValue) -> str:
        with ProfileContext("serialize"):
            out: list[str] = []
            if value.kind is JsonType.OBJECT or value.kind is JsonType.ARRAY:
                self._write_container(value, out)
            else:
                out.append(self._encode_scalar(value))
            return "".join(out)

    def _encode_scalar(self, value: JsonValue) -> str:
        if value.kind is JsonType.INT:
            return str(value.data)
        elif value.kind is JsonType.FLOAT:
            return encode_float(value.data)  # type: ignore[arg-type]
        elif value.kind is JsonType.BOOL:
            return "true" if value.data else "false"
        elif value.kind is JsonType.NULL:
            return "null"
        elif value.kind is JsonType.STRING:
            return encode_string(self.context.as_string(value))
        else:
            raise TypeError(f"not a scalar value: {value.kind.value}")

    def _open(
        self,
        value: JsonValue,
        depth: int,
        out: list[str],
        stack: list[_OpenContainer],
        on_path: set[tuple[JsonType, int]],
    ) -> None:
        ident = (value.kind, value.data)
        if ident in on_path:
            raise ValueError("Circular reference detected")

        container_id: int = value.data  # type: ignore[assignment]
        if value.kind is JsonType.OBJECT:
            size = self.context.object_len(container_id)
            opener, closer = "{", "}"
            entries: Iterator = self.context._iter_members(container_id)
        else:
            size = self.context.array_len(container_id)
            opener, closer = "[", "]"
            entries = self.context._iter_elements(container_id)

        if not size:
            out.append(opener + closer)
            return

        out.append(opener)
        on_path.add(ident)  # type: ignore[arg-type]
        stack.append(_OpenContainer(ident, entries, closer, depth))  # type: ignore[arg-type]

    def _write_container(self, value: JsonValue, out: list[str]) -> None:
        pretty = self.config.pretty
        indent = self.config.indent
        key_separator = ": " if pretty else ":"

        stack: list[_OpenContainer] = []
        on_path: set[tuple[JsonType, int]] = set()
        self._open(value, 0, out, stack, on_path)

        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)

            if entry is None:
                stack.pop()
                on_path.discard(frame.ident)
                if pretty:
                    out.append("\n" + indent * frame.depth)
                out.append(frame.closer)
                continue

            if frame.written:
                out.append(",")
            frame.written += 1
            if pretty:
                out.append("\n" + indent * (frame.depth + 1))

            if isinstance(entry, tuple):
                key, child = entry
                out.append(encode_string(key))
                out.append(key_separator)
            else:
                child = entry

            if child.kind is JsonType.OBJECT or child.kind is JsonType.ARRAY:
                self._open(child, frame.depth + 1, out, stack, on_path)
            else:
                out.append(self._encode_scalar(child))
