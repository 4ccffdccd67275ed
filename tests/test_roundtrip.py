"""
Round-trip tests between parse() and to_text().

Validates that serializer output is itself accepted by the parser and that
a second pass reproduces the first one exactly.
"""

import json

import pytest

import arenajson

DOCUMENTS = [
    "{}",
    "[]",
    '{"a": 1, "b": [true, false, null], "c": {"d": "e"}}',
    "[0x7fffffffffffffff, -0b1, 017, 1.5f, 1e-7, 2340.0000001]",
    r'["tab\there", "quote\"", "é😀", "\x00\x1f"]',
    '// note\n{"nested": [[[{"deep": [1, 2, 3]}]]], /* x */ "z": -0.0}',
    '{"same": {"k": 1}, "other": {"k": 1}}',
]


@pytest.mark.parametrize("document", DOCUMENTS)
@pytest.mark.parametrize("pretty", [False, True])
def test_output_is_a_fixed_point(document: str, pretty: bool) -> None:
    """
    Validates that parsing serializer output reproduces it unchanged.
    """
    first, _ = arenajson.parse(document)
    text = first.to_text(pretty)

    second, _ = arenajson.parse(text)
    assert second.to_text(pretty) == text


def test_pretty_and_compact_describe_same_document() -> None:
    """
    Validates that pretty output parses back to the compact form.
    """
    context, _ = arenajson.parse(DOCUMENTS[2])

    reparsed, _ = arenajson.parse(context.to_text(pretty=True))
    assert reparsed.to_text() == context.to_text()


def test_floats_survive_bit_exact() -> None:
    """
    Validates that float values keep every bit across a round trip.
    """
    values = [
        2340.0000001,
        -1230.1293,
        0.1,
        1e-300,
        5e-324,
        1.7976931348623157e308,
    ]
    context = arenajson.JsonContext(root_object=False)
    for value in values:
        context.push(context.root_id, context.new_float(value))

    reparsed, root_id = arenajson.parse(context.to_text())

    restored = [reparsed.as_float(v) for v in reparsed.values(root_id)]
    assert [v.hex() for v in restored] == [v.hex() for v in values]


def test_matches_stdlib_for_plain_json() -> None:
    """
    Validates agreement with the json module on plain ASCII documents.
    """
    document = '{"a": [1, 2.5, "x", null, true], "b": {"c": -3}}'
    context, _ = arenajson.parse(document)

    assert json.loads(context.to_text()) == json.loads(document)
    assert context.to_text() == json.dumps(
        json.loads(document), separators=(",", ":")
    )
