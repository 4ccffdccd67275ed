"""
Pytest configuration and shared fixtures for arenajson tests.

Provides immutable parse cases: documents that must build, with their
compact rendering, and documents that must fail, with the error kind and
the 1-based position the error has to report.
"""

from dataclasses import dataclass

import pytest

from arenajson import JsonContext
from arenajson import ParseErrorKind


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for one parse case.

    Passing cases carry the expected compact output; failing cases carry
    the error kind, offending text and position.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: str = ""
    error_kind: ParseErrorKind | None = None
    error_text: str = ""
    line: int = 1
    column: int = 1


@pytest.fixture
def context() -> JsonContext:
    """A fresh object-rooted context."""
    return JsonContext()


@pytest.fixture
def superset_pass_cases() -> list[JsonTestCase]:
    """
    Documents inside the accepted JSON superset and their compact output.
    """
    return [
        JsonTestCase("empty object", "{}", expected_output="{}"),
        JsonTestCase("empty array", "[]", expected_output="[]"),
        JsonTestCase(
            "padded empty containers",
            "{ \n\t }",
            expected_output="{}",
        ),
        JsonTestCase(
            "trailing comma in object",
            '{"a":1,}',
            expected_output='{"a":1}',
        ),
        JsonTestCase(
            "trailing comma in array", "[1,2,]", expected_output="[1,2]"
        ),
        JsonTestCase(
            "line and block comments",
            '// leading\n{"a": /* inline */ 1} // trailing',
            expected_output='{"a":1}',
        ),
        JsonTestCase(
            "multi-line block comment",
            '[\n/* one\n * two **/\n"x"]',
            expected_output='["x"]',
        ),
        JsonTestCase(
            "radix integers",
            '{"x": 0x1F, "b": 0b101, "o": 0o17, "z": 017, "d": 42}',
            expected_output='{"x":31,"b":5,"o":15,"z":15,"d":42}',
        ),
        JsonTestCase(
            "hex digits that look like float markers",
            "[0xE, 0xdF, -0XfF]",
            expected_output="[14,223,-255]",
        ),
        JsonTestCase(
            "signed integers",
            "[+5, -0, 0, -17]",
            expected_output="[5,0,0,-17]",
        ),
        JsonTestCase(
            "float forms and suffixes",
            "[1.5f, 2d, -3.25e2, 1E-2, -.5, 6.D]",
            expected_output="[1.5,2.0,-325.0,0.01,-0.5,6.0]",
        ),
        JsonTestCase(
            "keywords",
            '{"t":true,"f":false,"n":null}',
            expected_output='{"t":true,"f":false,"n":null}',
        ),
        JsonTestCase(
            "hex, unicode and surrogate escapes",
            r'["\x41\u00e9", "\uD83D\uDE00", "é"]',
            expected_output=r'["A\u00E9","\uD83D\uDE00","\u00E9"]',
        ),
        JsonTestCase(
            "extended simple escapes",
            r'["\'\v\0"]',
            expected_output=r'["\'\v\0"]',
        ),
        JsonTestCase(
            "windows line endings",
            '{\r\n  "a": 1\r\n}\r\n',
            expected_output='{"a":1}',
        ),
        JsonTestCase(
            "nested containers",
            '{"a": [1, {"b": [[], {}]}], "c": {"d": {"e": "f"}}}',
            expected_output='{"a":[1,{"b":[[],{}]}],"c":{"d":{"e":"f"}}}',
        ),
        JsonTestCase(
            "same key in sibling objects",
            '[{"k": 1}, {"k": 2}]',
            expected_output='[{"k":1},{"k":2}]',
        ),
    ]


@pytest.fixture
def parse_fail_cases() -> list[JsonTestCase]:
    """
    Malformed documents with the error kind and position they must report.
    """
    kind = ParseErrorKind
    return [
        JsonTestCase(
            "missing value",
            '{"a": }',
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text="}",
            column=7,
        ),
        JsonTestCase(
            "duplicate key",
            '{"a":1,"a":2}',
            True,
            error_kind=kind.KEY_EXISTS,
            error_text="a",
            column=8,
        ),
        JsonTestCase(
            "duplicate key in nested object",
            '{"a":{"b":1,"b":2}}',
            True,
            error_kind=kind.KEY_EXISTS,
            error_text="b",
            column=13,
        ),
        JsonTestCase(
            "empty document",
            "",
            True,
            error_kind=kind.EMPTY_STRING,
        ),
        JsonTestCase(
            "string root",
            '"just a string"',
            True,
            error_kind=kind.BAD_BEGINNING,
            error_text="just a string",
        ),
        JsonTestCase(
            "number root",
            "42",
            True,
            error_kind=kind.BAD_BEGINNING,
            error_text="42",
        ),
        JsonTestCase(
            "trailing container",
            "{} []",
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text="[",
            column=4,
        ),
        JsonTestCase(
            "missing colon",
            '{"a" 1}',
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text="1",
            column=6,
        ),
        JsonTestCase(
            "missing comma in object",
            '{"a":1 "b":2}',
            True,
            error_kind=kind.EXPECTED_CHAR,
            error_text=",",
            column=8,
        ),
        JsonTestCase(
            "missing comma in array",
            "[1 2]",
            True,
            error_kind=kind.EXPECTED_CHAR,
            error_text=",",
            column=4,
        ),
        JsonTestCase(
            "mismatched closer",
            "[1}",
            True,
            error_kind=kind.EXPECTED_CHAR,
            error_text=",",
            column=3,
        ),
        JsonTestCase(
            "object closer inside array",
            '{"a":[}',
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text="}",
            column=7,
        ),
        JsonTestCase(
            "double comma",
            "[1,,2]",
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text=",",
            column=4,
        ),
        JsonTestCase(
            "unclosed object",
            '{"a":1',
            True,
            error_kind=kind.UNEXPECTED_END_OF_TOKENS,
            column=7,
        ),
        JsonTestCase(
            "unclosed array",
            "[",
            True,
            error_kind=kind.UNEXPECTED_END_OF_TOKENS,
            column=2,
        ),
        JsonTestCase(
            "unquoted key",
            "{1:2}",
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text="1",
            column=2,
        ),
        JsonTestCase(
            "truncated keyword",
            "[tru]",
            True,
            error_kind=kind.EXPECTED_WORD,
            error_text="true",
            column=2,
        ),
        JsonTestCase(
            "whitespace inside keyword",
            "[nul l]",
            True,
            error_kind=kind.EXPECTED_WORD,
            error_text="null",
            column=2,
        ),
        JsonTestCase(
            "stray character",
            "[@]",
            True,
            error_kind=kind.UNEXPECTED_CHAR,
            error_text="@",
            column=2,
        ),
        JsonTestCase(
            "unknown escape",
            r'["\q"]',
            True,
            error_kind=kind.STRING_ESCAPE_CHAR,
            error_text="q",
            column=4,
        ),
        JsonTestCase(
            "bad unicode escape digit",
            r'["\u12G4"]',
            True,
            error_kind=kind.STRING_UNICODE,
            error_text="G",
            column=7,
        ),
        JsonTestCase(
            "bad hex escape digit",
            r'["\xZ1"]',
            True,
            error_kind=kind.STRING_UNICODE,
            error_text="Z",
            column=5,
        ),
        JsonTestCase(
            "unterminated string",
            '["abc',
            True,
            error_kind=kind.UNTERMINATED_STRING,
            error_text='"',
            column=2,
        ),
        JsonTestCase(
            "unterminated block comment",
            "[1] /* open",
            True,
            error_kind=kind.UNEXPECTED_END_OF_TOKENS,
            error_text="/*",
            column=5,
        ),
        JsonTestCase(
            "slash without comment",
            "[1] /x",
            True,
            error_kind=kind.UNEXPECTED_CHAR,
            error_text="x",
            column=6,
        ),
        JsonTestCase(
            "bad binary digit",
            "[0b102]",
            True,
            error_kind=kind.INTEGER_INVALID_BINARY,
            error_text="2",
            column=6,
        ),
        JsonTestCase(
            "bad hex digit",
            "[0x1G]",
            True,
            error_kind=kind.INTEGER_INVALID_HEX,
            error_text="G",
            column=5,
        ),
        JsonTestCase(
            "bad octal digit after prefix",
            "[0o78]",
            True,
            error_kind=kind.INTEGER_INVALID_OCTAL,
            error_text="8",
            column=5,
        ),
        JsonTestCase(
            "bad octal digit after leading zero",
            "[089]",
            True,
            error_kind=kind.INTEGER_INVALID_OCTAL,
            error_text="8",
            column=3,
        ),
        JsonTestCase(
            "bad decimal digit",
            "[12a]",
            True,
            error_kind=kind.INTEGER_INVALID_DECIMAL,
            error_text="a",
            column=4,
        ),
        JsonTestCase(
            "second decimal point",
            "[1.2.3]",
            True,
            error_kind=kind.UNEXPECTED_CHAR,
            error_text=".",
            column=5,
        ),
        JsonTestCase(
            "exponent without digits",
            "[1e]",
            True,
            error_kind=kind.UNEXPECTED_EOL,
            error_text="1e",
            column=4,
        ),
        JsonTestCase(
            "exponent with junk",
            "[1e+x]",
            True,
            error_kind=kind.UNEXPECTED_CHAR,
            error_text="x",
            column=5,
        ),
        JsonTestCase(
            "characters after suffix",
            "[1.5fx]",
            True,
            error_kind=kind.UNEXPECTED_CHAR,
            error_text="x",
            column=6,
        ),
        JsonTestCase(
            "float past double range",
            '{"big": 1e400}',
            True,
            error_kind=kind.FLOAT_OUT_OF_RANGE,
            error_text="1e400",
            column=9,
        ),
        JsonTestCase(
            "lone sign",
            "[-]",
            True,
            error_kind=kind.UNEXPECTED_EOL,
            error_text="-",
            column=3,
        ),
        JsonTestCase(
            "error on a later line",
            '{\n  "a": [1,\n    }\n}',
            True,
            error_kind=kind.UNEXPECTED_TOKEN,
            error_text="}",
            line=3,
            column=5,
        ),
    ]
