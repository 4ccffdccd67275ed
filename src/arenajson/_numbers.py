"""
Interpreter for the raw number tokens produced by the lexer.

Integers may be written in decimal, hex (0x), binary (0b) or octal (0o, or
a plain leading zero). Floats follow the usual mantissa/exponent grammar
and may end in one of the suffixes f, F, d or D.
"""

import math

from ._config import ParseConfig
from ._errors import JSONParseError
from ._errors import ParseErrorKind
from ._profiling import ProfileContext
from ._values import INT64_MAX
from ._values import INT64_MIN
from ._values import wrap_int64

_DEFAULT_CONFIG = ParseConfig()

_DECIMAL_DIGITS = frozenset("0123456789")
_DIGIT_VALUES = {char: int(char, 16) for char in "0123456789abcdefABCDEF"}
_FLOAT_MARKERS = frozenset(".eE")
_FLOAT_SUFFIXES = frozenset("fFdD")
_RADIX_PREFIXES = {"x": 16, "X": 16, "b": 2, "B": 2, "o": 8, "O": 8}

_INVALID_DIGIT = {
    2: ParseErrorKind.INTEGER_INVALID_BINARY,
    8: ParseErrorKind.INTEGER_INVALID_OCTAL,
    10: ParseErrorKind.INTEGER_INVALID_DECIMAL,
    16: ParseErrorKind.INTEGER_INVALID_HEX,
}


def is_float_literal(text: str) -> bool:
    """
    Classifies a raw literal as float or integer.

    Hex literals are always integers: their digits may include e, d and f,
    which would otherwise read as an exponent or a suffix.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    if body[:2] in ("0x", "0X"):
        return False
    return not _FLOAT_MARKERS.isdisjoint(body) or body[-1:] in _FLOAT_SUFFIXES


def interpret_number(
    text: str, line: int, column: int, config: ParseConfig | None = None
) -> tuple[int | float, bool]:
    """
    Turns a raw number token into (value, is_float).

    line and column locate the first character of the token; errors
    point at the offending character inside it.
    """
    with ProfileContext("interpret_number", len(text)):
        if config is None:
            config = _DEFAULT_CONFIG

        negative = text.startswith("-")
        start = 1 if text.startswith(("+", "-")) else 0
        if start >= len(text):
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_EOL, text, line, column + start
            )

        if is_float_literal(text):
            value = _interpret_float(text, start, line, column)
            return (-value if negative else value), True

        return (
            _interpret_integer(text, start, negative, line, column, config),
            False,
        )


def _interpret_integer(
    text: str,
    start: int,
    negative: bool,
    line: int,
    column: int,
    config: ParseConfig,
) -> int:
    radix = 10
    digits_start = start
    if text[start] == "0":
        if start + 1 == len(text):
            return 0
        marker = text[start + 1]
        if marker in _RADIX_PREFIXES:
            radix = _RADIX_PREFIXES[marker]
            digits_start = start + 2
        else:
            radix = 8
            digits_start = start + 1
        if digits_start == len(text):
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_EOL, text, line, column + len(text)
            )

    accumulator = 0
    for offset in range(digits_start, len(text)):
        char = text[offset]
        digit = _DIGIT_VALUES.get(char)
        if digit is None or digit >= radix:
            raise JSONParseError(
                _INVALID_DIGIT[radix], char, line, column + offset
            )
        accumulator = accumulator * radix + digit

    if config.wrap_integers:
        # Same result as a wrapping u64 accumulator reinterpreted as i64
        magnitude = wrap_int64(accumulator)
        return wrap_int64(-magnitude) if negative else magnitude

    value = -accumulator if negative else accumulator
    if not INT64_MIN <= value <= INT64_MAX:
        raise JSONParseError(
            ParseErrorKind.INTEGER_OVERFLOW, text, line, column
        )
    return value


def _interpret_float(text: str, start: int, line: int, column: int) -> float:
    """Validates the float grammar, then converts with one rounding step."""
    end = len(text)
    index = start
    seen_point = False
    seen_digit = False

    while index < end:
        char = text[index]
        if char in _DECIMAL_DIGITS:
            seen_digit = True
        elif char == ".":
            if seen_point:
                raise JSONParseError(
                    ParseErrorKind.UNEXPECTED_CHAR, char, line, column + index
                )
            seen_point = True
        else:
            break
        index += 1

    if not seen_digit:
        if index == end:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_EOL, text, line, column + index
            )
        raise JSONParseError(
            ParseErrorKind.UNEXPECTED_CHAR, text[index], line, column + index
        )
    mantissa = text[start:index]

    exponent = ""
    if index < end and text[index] in "eE":
        index += 1
        exponent_start = index
        if index < end and text[index] in "+-":
            index += 1
        digits_start = index
        while index < end and text[index] in _DECIMAL_DIGITS:
            index += 1
        if index == digits_start:
            if index == end:
                raise JSONParseError(
                    ParseErrorKind.UNEXPECTED_EOL, text, line, column + index
                )
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_CHAR,
                text[index],
                line,
                column + index,
            )
        exponent = "e" + text[exponent_start:index]

    if index < end and text[index] in _FLOAT_SUFFIXES:
        index += 1

    if index < end:
        raise JSONParseError(
            ParseErrorKind.UNEXPECTED_CHAR, text[index], line, column + index
        )

    value = float(mantissa + exponent)
    if math.isinf(value):
        raise JSONParseError(
            ParseErrorKind.FLOAT_OUT_OF_RANGE, text, line, column
        )
    return value
