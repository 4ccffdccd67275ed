"""
Error taxonomy for parsing and for misuse of the context API.

Parse errors describe malformed documents and always carry the offending
text plus a 1-based line and column. API errors describe a caller asking
the context for something it does not hold; they are raised instead of
aborting so the host application can recover.
"""

from enum import Enum


class ParseErrorKind(Enum):
    """Kinds of failures raised while lexing, interpreting or building."""

    EMPTY_STRING = "Empty document"
    KEY_EXISTS = "Duplicate key"
    BAD_BEGINNING = "Document must start with '{' or '['"
    UNEXPECTED_EOL = "Unexpected end of input"
    UNEXPECTED_END_OF_TOKENS = "Unexpected end of tokens"
    EXPECTED_CHAR = "Expected character"
    EXPECTED_WORD = "Expected keyword"
    UNEXPECTED_CHAR = "Unexpected character"
    UNEXPECTED_TOKEN = "Unexpected token"
    STRING_UNICODE = "Invalid hex digit in escape"
    STRING_ESCAPE_CHAR = "Invalid escape character"
    UNTERMINATED_STRING = "Unterminated string"
    INTEGER_INVALID_DECIMAL = "Invalid decimal digit"
    INTEGER_INVALID_BINARY = "Invalid binary digit"
    INTEGER_INVALID_OCTAL = "Invalid octal digit"
    INTEGER_INVALID_HEX = "Invalid hex digit"
    INTEGER_OVERFLOW = "Integer out of 64-bit range"
    FLOAT_OUT_OF_RANGE = "Float out of double range"
    NESTING_TOO_DEEP = "Maximum nesting depth exceeded"


class JSONParseError(ValueError):
    """
    Handles parse failures with the offending text and its position.

    The partially built document is never returned alongside this error;
    callers get either a complete context or this exception.
    """

    def __init__(
        self, kind: ParseErrorKind, text: str, lineno: int, colno: int
    ) -> None:
        if not isinstance(kind, ParseErrorKind):
            raise TypeError("kind must be a ParseErrorKind")

        self.kind = kind
        self.text = text
        self.lineno = lineno
        self.colno = colno
        self.msg = f"{kind.value}: {text!r}" if text else kind.value

        super().__init__(f"{self.msg} at line {lineno}, column {colno}")


class ApiErrorKind(Enum):
    """Kinds of context API misuse."""

    KEY_NOT_FOUND = "key not found"
    TYPE_MISMATCH = "type mismatch"
    INDEX_OUT_OF_RANGE = "index out of range"
    EMPTY_ARRAY = "array is empty"
    UNKNOWN_ID = "unknown id"


class JSONApiError(Exception):
    """Base class for errors caused by misusing a JsonContext."""

    kind: ApiErrorKind

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}"


class KeyNotFoundError(JSONApiError, KeyError):
    kind = ApiErrorKind.KEY_NOT_FOUND


class TypeMismatchError(JSONApiError, TypeError):
    kind = ApiErrorKind.TYPE_MISMATCH


class IndexOutOfRangeError(JSONApiError, IndexError):
    kind = ApiErrorKind.INDEX_OUT_OF_RANGE


class EmptyArrayError(JSONApiError, IndexError):
    kind = ApiErrorKind.EMPTY_ARRAY


class UnknownIdError(JSONApiError, LookupError):
    kind = ApiErrorKind.UNKNOWN_ID
