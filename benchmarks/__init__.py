"""
Benchmark suite for arenajson parsing and serialization.

Compares arenajson against established JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parse and render speed plus peak memory across document shapes.
"""
