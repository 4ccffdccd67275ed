"""
Hot-path profiling switched on by the ARENAJSON_PROFILE environment variable.

The lexer, builder and serializer wrap their entry points in ProfileContext.
With profiling off the wrapper is a no-op, so the instrumentation stays in
place in production builds.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "ARENAJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one instrumented phase."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def ns_per_char(self) -> float:
        if not self.chars_processed:
            return 0.0
        return self.total_time_ns / self.chars_processed


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Times the enclosed block and files it under phase_name."""

        def __init__(self, phase_name: str, chars: int = 0) -> None:
            self.phase_name = phase_name
            self.chars = chars
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _hot_path_stats.get(self.phase_name)
            if stats is None:
                stats = _hot_path_stats[self.phase_name] = HotPathStats(
                    self.phase_name
                )
            stats.record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of the collected statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        _hot_path_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, phase_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


def format_hot_path_stats(stats: dict[str, HotPathStats]) -> str:
    """
    Renders collected statistics as a fixed-width table.

    Rows are ordered by total time, slowest phase first.
    """
    rows = sorted(stats.values(), key=lambda s: s.total_time_ns, reverse=True)
    lines = [f"{'phase':<16}{'calls':>10}{'total ms':>12}{'ns/char':>10}"]
    for row in rows:
        lines.append(
            f"{row.function_name:<16}{row.call_count:>10}"
            f"{row.total_time_ns / 1e6:>12.3f}{row.ns_per_char:>10.1f}"
        )
    return "\n".join(lines)
