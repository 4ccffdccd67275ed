"""Immutable parse and encode settings."""

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 512


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    max_depth bounds container nesting for untrusted input. wrap_integers
    keeps the 64-bit wrapping accumulator; turning it off makes out of
    range integer literals a parse error instead.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    wrap_integers: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if not isinstance(self.wrap_integers, bool):
            raise TypeError("wrap_integers must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures serialization with immutable settings.

    Pretty output puts every entry on its own line, indented by one copy
    of indent per nesting level.
    """

    pretty: bool = False
    indent: str = "\t"

    def __post_init__(self) -> None:
        if not isinstance(self.pretty, bool):
            raise TypeError("pretty must be a boolean")
        if not isinstance(self.indent, str):
            raise TypeError("indent must be a string")
        if self.indent.strip(" \t"):
            raise ValueError("indent must contain only spaces and tabs")
