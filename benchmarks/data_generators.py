"""
Document generators for the parsing benchmarks.

Standard shapes are produced with json.dumps so every library under test can
read them. The superset shapes use comments, radix integers and float
suffixes that only arenajson accepts.
"""

import json
import random
import string
from typing import Any

STANDARD_SHAPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
)
SUPERSET_SHAPES = ("annotated_config",)

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['"', "\\", "\b", "\f", "\n", "\r", "\t", "'", "\v", "\0"]


def generate_test_data(data_type: str) -> str:
    """Generates a document of the named shape, identical across calls."""
    generators = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
        "annotated_config": _annotated_config,
    }
    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    rng = random.Random(_SEED)
    return generators[data_type](rng)


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))


def _timestamp(rng: random.Random) -> str:
    return (
        f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        f"T{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00Z"
    )


def _small_object(rng: random.Random) -> str:
    """Under 1KB of flat members and one nested object."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _large_object(rng: random.Random) -> str:
    """Over 10KB: a profile with transaction and activity histories."""
    data = {
        "user_id": rng.randint(1_000_000, 9_999_999),
        "profile": {
            "first_name": _word(rng, 10),
            "last_name": _word(rng, 12),
            "email": f"{_word(rng, 8)}@{_word(rng, 6)}.com",
            "address": {
                "street": f"{rng.randint(1, 9999)} {_word(rng, 8)} St",
                "city": _word(rng, 12),
                "zip": f"{rng.randint(10000, 99999)}",
                "country": "US",
            },
            "notifications": {
                channel: rng.choice([True, False])
                for channel in ("email", "sms", "push")
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "timestamp": _timestamp(rng),
                "description": f"Payment for {_word(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "timestamp": _timestamp(rng),
                "action": rng.choice(["login", "logout", "purchase", "view"]),
                "ip_address": ".".join(
                    str(rng.randint(1, 255)) for _ in range(4)
                ),
            }
            for _ in range(30)
        ],
    }
    return json.dumps(data)


def _mixed_array(rng: random.Random) -> str:
    """A 200-element array mixing every value type."""
    makers = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _word(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {
            "index": i,
            "value": _word(rng, 10),
            "score": round(rng.uniform(0, 100), 2),
        },
    ]
    array: list[Any] = [rng.choice(makers)(i) for i in range(200)]
    return json.dumps(array)


def _nested_structure(rng: random.Random) -> str:
    """A fan-out tree eight levels deep."""

    def level(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _word(rng, 10)}
        return {
            "level": depth,
            "data": _word(rng, 15),
            "items": [level(depth - 1) for _ in range(3)],
            "nested": level(depth - 1),
        }

    return json.dumps(level(8))


def _string_heavy(rng: random.Random) -> str:
    """Strings dense with characters that have to be escaped."""

    def escaped(length: int = 50) -> str:
        chars = []
        for _ in range(length):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return "".join(chars)

    data = {
        "strings": [escaped() for _ in range(100)],
        "unicode": [chr(rng.randint(0xA0, 0x2FFF)) * 8 for _ in range(50)],
        "documents": {
            f"key_{i}": {
                "description": escaped(),
                "path": f"C:\\Users\\{_word(rng, 8)}\\file_{i}.txt",
            }
            for i in range(20)
        },
    }
    return json.dumps(data)


def _annotated_config(rng: random.Random) -> str:
    """A commented settings file using hex, binary and suffixed floats."""
    sections = []
    for index in range(100):
        sections.append(
            f"  // section {index}\n"
            f'  "{_word(rng, 8)}_{index}": {{\n'
            f'    "mask": 0x{rng.getrandbits(32):08X}, /* bit mask */\n'
            f'    "flags": 0b{rng.getrandbits(8):08b},\n'
            f'    "mode": 0o{rng.randint(0, 0o777):o},\n'
            f'    "ratio": {rng.uniform(0, 10):.4f}f,\n'
            f'    "enabled": {rng.choice(["true", "false"])},\n'
            f"  }},\n"
        )
    return "{\n" + "".join(sections) + "}\n"
