"""
Tokenizer for the accepted JSON superset.

On top of standard JSON it strips // and /* */ comments, accepts the extra
string escapes \\' \\v \\0 \\xHH, and collects any run starting with a digit or
sign as one raw number token for the numeric interpreter to judge later.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ._errors import JSONParseError
from ._errors import ParseErrorKind
from ._profiling import ProfileContext


class TokenType(Enum):
    OBJECT_START = "{"
    OBJECT_END = "}"
    ARRAY_START = "["
    ARRAY_END = "]"
    COLON = ":"
    COMMA = ","
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class JsonToken:
    """
    One lexical unit and the position of its first character.

    For strings, value holds the decoded content without quotes; for
    numbers, the raw literal text.
    """

    type: TokenType
    value: str
    line: int
    column: int


_PUNCTUATION = {
    "{": TokenType.OBJECT_START,
    "}": TokenType.OBJECT_END,
    "[": TokenType.ARRAY_START,
    "]": TokenType.ARRAY_END,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_KEYWORDS = {
    "t": ("true", TokenType.TRUE),
    "f": ("false", TokenType.FALSE),
    "n": ("null", TokenType.NULL),
}

_SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "v": "\v",
    "r": "\r",
    "0": "\0",
    "b": "\b",
    "f": "\f",
}

_WHITESPACE = frozenset(" \t\n\r")
_NUMBER_START = frozenset("0123456789+-")
_NUMBER_EXTRA = frozenset(".+-")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_STRING_RUN = re.compile(r'[^"\\]*')

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


class JsonLexer:
    """
    Converts text into a list of position-tagged tokens.

    Lines and columns are 1-based. A newline bumps the line and resets the
    column to 0, so the first character of every line sits in column 1.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.line = 1
        self.column = 0

    @property
    def end_position(self) -> tuple[int, int]:
        """Line and column just past the last consumed character."""
        return self.line, self.column + 1

    def peek(self) -> str:
        """Returns current character without advancing, "" at the end."""
        return self.text[self.pos] if self.pos < self.length else ""

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return char

    def _consume_until(self, end: int) -> str:
        """Advances over text[pos:end] in one step, keeping line/column."""
        chunk = self.text[self.pos : end]
        newlines = chunk.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(chunk) - chunk.rfind("\n") - 1
        else:
            self.column += len(chunk)
        self.pos = end
        return chunk

    def skip_ignored(self) -> None:
        """Skips whitespace and comments."""
        while self.pos < self.length:
            char = self.text[self.pos]
            if char in _WHITESPACE:
                self.advance()
            elif char == "/":
                self._skip_comment()
            else:
                return

    def _skip_comment(self) -> None:
        line, column = self.end_position
        self.advance()
        if self.pos >= self.length:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_EOL, "/", line, column
            )

        marker_line, marker_column = self.end_position
        marker = self.advance()
        if marker == "/":
            end = self.text.find("\n", self.pos)
            self._consume_until(self.length if end < 0 else end)
        elif marker == "*":
            end = self.text.find("*/", self.pos)
            if end < 0:
                raise JSONParseError(
                    ParseErrorKind.UNEXPECTED_END_OF_TOKENS, "/*", line, column
                )
            self._consume_until(end + 2)
        else:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_CHAR,
                marker,
                marker_line,
                marker_column,
            )

    def next_token(self) -> JsonToken | None:
        """Returns the next token or None if at end."""
        self.skip_ignored()
        if self.pos >= self.length:
            return None

        line, column = self.end_position
        char = self.peek()

        token_type = _PUNCTUATION.get(char)
        if token_type is not None:
            self.advance()
            return JsonToken(token_type, char, line, column)
        elif char == '"':
            return self.scan_string(line, column)
        elif char in _KEYWORDS:
            return self.scan_keyword(line, column)
        elif char in _NUMBER_START:
            return self.scan_number(line, column)
        else:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_CHAR, char, line, column
            )

    def scan_keyword(self, line: int, column: int) -> JsonToken:
        """Matches true/false/null character for character."""
        word, token_type = _KEYWORDS[self.peek()]
        if not self.text.startswith(word, self.pos):
            raise JSONParseError(
                ParseErrorKind.EXPECTED_WORD, word, line, column
            )
        self._consume_until(self.pos + len(word))
        return JsonToken(token_type, word, line, column)

    def scan_number(self, line: int, column: int) -> JsonToken:
        """Collects a raw literal; interpretation is deferred."""
        start = self.pos
        end = start + 1
        while end < self.length:
            char = self.text[end]
            if not (char.isalnum() or char in _NUMBER_EXTRA):
                break
            end += 1
        return JsonToken(
            TokenType.NUMBER, self._consume_until(end), line, column
        )

    def scan_string(self, line: int, column: int) -> JsonToken:
        """Scans a quoted string and decodes its escapes."""
        self.advance()
        chunks: list[str] = []

        while True:
            run = _STRING_RUN.match(self.text, self.pos)
            if run is not None and run.end() > self.pos:
                chunks.append(self._consume_until(run.end()))

            if self.pos >= self.length:
                raise JSONParseError(
                    ParseErrorKind.UNTERMINATED_STRING, '"', line, column
                )

            if self.advance() == '"':
                return JsonToken(TokenType.STRING, "".join(chunks), line, column)
            chunks.append(self._scan_escape(line, column))

    def _scan_escape(self, line: int, column: int) -> str:
        """Decodes one escape; the backslash is already consumed."""
        if self.pos >= self.length:
            raise JSONParseError(
                ParseErrorKind.UNTERMINATED_STRING, '"', line, column
            )

        escape_line, escape_column = self.end_position
        letter = self.advance()

        simple = _SIMPLE_ESCAPES.get(letter)
        if simple is not None:
            return simple
        elif letter == "x":
            return chr(self._read_hex(2, line, column))
        elif letter == "u":
            code = self._read_hex(4, line, column)
            if code in _HIGH_SURROGATES:
                code = self._join_low_surrogate(code)
            return chr(code)
        else:
            raise JSONParseError(
                ParseErrorKind.STRING_ESCAPE_CHAR,
                letter,
                escape_line,
                escape_column,
            )

    def _read_hex(self, count: int, line: int, column: int) -> int:
        code = 0
        for _ in range(count):
            if self.pos >= self.length:
                raise JSONParseError(
                    ParseErrorKind.UNTERMINATED_STRING, '"', line, column
                )
            digit_line, digit_column = self.end_position
            digit = self.advance()
            if digit not in _HEX_DIGITS:
                raise JSONParseError(
                    ParseErrorKind.STRING_UNICODE,
                    digit,
                    digit_line,
                    digit_column,
                )
            code = (code << 4) | int(digit, 16)
        return code

    def _join_low_surrogate(self, high: int) -> int:
        """Combines a \\uD8xx\\uDCxx pair; a lone high half is kept as is."""
        if not self.text.startswith("\\u", self.pos):
            return high
        candidate = self.text[self.pos + 2 : self.pos + 6]
        if len(candidate) != 4 or not _HEX_DIGITS.issuperset(candidate):
            return high
        low = int(candidate, 16)
        if low not in _LOW_SURROGATES:
            return high
        self._consume_until(self.pos + 6)
        return 0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)

    def tokenize(self) -> list[JsonToken]:
        """Scans the whole input."""
        with ProfileContext("tokenize", self.length):
            tokens: list[JsonToken] = []
            while (token := self.next_token()) is not None:
                tokens.append(token)
            return tokens


def tokenize(text: str) -> list[JsonToken]:
    """Tokenizes text in one call."""
    return JsonLexer(text).tokenize()
