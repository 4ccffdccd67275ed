"""
Arena-backed JSON documents with a superset parser and strict serializer.

Documents live in a JsonContext that owns every object, array and string
behind integer ids. parse() accepts JSON plus comments, radix integer
literals and float suffixes; JsonContext.to_text() writes strict,
ASCII-only JSON, compact or tab-indented.
"""

import logging

from ._arena import JsonContext
from ._config import EncodeConfig
from ._config import ParseConfig
from ._errors import ApiErrorKind
from ._errors import EmptyArrayError
from ._errors import IndexOutOfRangeError
from ._errors import JSONApiError
from ._errors import JSONParseError
from ._errors import KeyNotFoundError
from ._errors import ParseErrorKind
from ._errors import TypeMismatchError
from ._errors import UnknownIdError
from ._lexer import JsonLexer
from ._lexer import JsonToken
from ._lexer import TokenType
from ._lexer import tokenize
from ._numbers import interpret_number
from ._parser import JsonBuilder
from ._parser import parse
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import format_hot_path_stats
from ._profiling import get_hot_path_stats
from ._serializer import JsonSerializer
from ._values import JsonType
from ._values import JsonValue

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def serialize(
    context: JsonContext, value: JsonValue | None = None, pretty: bool = False
) -> str:
    """Renders value, or the whole document when value is None."""
    if value is None:
        return context.to_text(pretty)
    return context.serialize(value, pretty)


__all__ = [
    "ApiErrorKind",
    "EmptyArrayError",
    "EncodeConfig",
    "HotPathStats",
    "IndexOutOfRangeError",
    "JSONApiError",
    "JSONParseError",
    "JsonBuilder",
    "JsonContext",
    "JsonLexer",
    "JsonSerializer",
    "JsonToken",
    "JsonType",
    "JsonValue",
    "KeyNotFoundError",
    "ParseConfig",
    "ParseErrorKind",
    "TokenType",
    "TypeMismatchError",
    "UnknownIdError",
    "clear_hot_path_stats",
    "format_hot_path_stats",
    "get_hot_path_stats",
    "interpret_number",
    "parse",
    "serialize",
    "tokenize",
]
