"""
Recursive-descent builder that populates a JsonContext from tokens.

The grammar is the usual mutual recursion between objects and arrays, but
the recursion is carried by an explicit stack of open containers so deep
documents are limited by ParseConfig.max_depth, not by Python's stack.
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from ._arena import JsonContext
from ._config import ParseConfig
from ._errors import JSONParseError
from ._errors import ParseErrorKind
from ._lexer import JsonLexer
from ._lexer import JsonToken
from ._lexer import TokenType
from ._numbers import interpret_number
from ._profiling import ProfileContext
from ._values import JsonValue

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    """An object or array whose closing delimiter has not been seen yet."""

    target_id: int
    is_object: bool
    depth: int
    awaiting_separator: bool = False
    seen_keys: set[str] = field(default_factory=set)

    @property
    def closer(self) -> TokenType:
        return TokenType.OBJECT_END if self.is_object else TokenType.ARRAY_END


class JsonBuilder:
    """
    Consumes tokens left to right and builds values into a context.

    Tokens are staged as a reversed list so every step pops from the end.
    Within one object a key may appear only once per parse, even though
    JsonContext.set itself always allows overwriting.
    """

    def __init__(
        self,
        tokens: list[JsonToken],
        context: JsonContext,
        config: ParseConfig | None = None,
        end_position: tuple[int, int] = (1, 1),
    ) -> None:
        self.context = context
        self.config = config if config is not None else ParseConfig()
        self.end_position = end_position
        self._pending = tokens[::-1]

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def next_token(self) -> JsonToken | None:
        """Pops the next unconsumed token, None once all are consumed."""
        return self._pending.pop() if self._pending else None

    def _pop(self) -> JsonToken:
        if not self._pending:
            line, column = self.end_position
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_END_OF_TOKENS, "", line, column
            )
        return self._pending.pop()

    def parse_object(self, target_id: int) -> None:
        """Fills an allocated object; the opening '{' is already consumed."""
        self._build(_Frame(target_id, is_object=True, depth=1))

    def parse_array(self, target_id: int) -> None:
        """Fills an allocated array; the opening '[' is already consumed."""
        self._build(_Frame(target_id, is_object=False, depth=1))

    def _build(self, root: _Frame) -> None:
        with ProfileContext("build", len(self._pending)):
            stack = [root]
            while stack:
                frame = stack[-1]
                token = self._pop()

                if frame.awaiting_separator:
                    if token.type is TokenType.COMMA:
                        frame.awaiting_separator = False
                    elif token.type is frame.closer:
                        stack.pop()
                    else:
                        raise JSONParseError(
                            ParseErrorKind.EXPECTED_CHAR,
                            ",",
                            token.line,
                            token.column,
                        )
                    continue

                if token.type is frame.closer:
                    stack.pop()
                    continue

                if frame.is_object:
                    key = self._read_key(frame, token)
                    token = self._pop()

                value, child = self._read_value(token, frame.depth)
                if frame.is_object:
                    self.context.set(frame.target_id, key, value)
                else:
                    self.context.push(frame.target_id, value)
                frame.awaiting_separator = True

                if child is not None:
                    stack.append(child)

    def _read_key(self, frame: _Frame, token: JsonToken) -> str:
        """Reads `"key" :` and rejects a key repeated within the object."""
        if token.type is not TokenType.STRING:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                token.value,
                token.line,
                token.column,
            )
        key = token.value
        if key in frame.seen_keys:
            raise JSONParseError(
                ParseErrorKind.KEY_EXISTS, key, token.line, token.column
            )
        frame.seen_keys.add(key)

        colon = self._pop()
        if colon.type is not TokenType.COLON:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                colon.value,
                colon.line,
                colon.column,
            )
        return key

    def _read_value(
        self, token: JsonToken, depth: int
    ) -> tuple[JsonValue, _Frame | None]:
        """
        Builds the value starting at token.

        For '{' and '[' the new, still empty container is returned together
        with the frame that will fill it.
        """
        context = self.context
        token_type = token.type

        if token_type is TokenType.TRUE:
            return context.new_bool(True), None
        elif token_type is TokenType.FALSE:
            return context.new_bool(False), None
        elif token_type is TokenType.NULL:
            return context.new_null(), None
        elif token_type is TokenType.STRING:
            return context.new_string(token.value), None
        elif token_type is TokenType.NUMBER:
            number, is_float = interpret_number(
                token.value, token.line, token.column, self.config
            )
            if is_float:
                return context.new_float(number), None
            return context.new_int(number), None  # type: ignore[arg-type]
        elif token_type is TokenType.OBJECT_START:
            self._check_depth(token, depth)
            value, object_id = context.new_object()
            return value, _Frame(object_id, is_object=True, depth=depth + 1)
        elif token_type is TokenType.ARRAY_START:
            self._check_depth(token, depth)
            value, array_id = context.new_array()
            return value, _Frame(array_id, is_object=False, depth=depth + 1)
        else:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                token.value,
                token.line,
                token.column,
            )

    def _check_depth(self, token: JsonToken, depth: int) -> None:
        if depth >= self.config.max_depth:
            raise JSONParseError(
                ParseErrorKind.NESTING_TOO_DEEP,
                token.value,
                token.line,
                token.column,
            )


def parse(text: str, **kwargs: Any) -> tuple[JsonContext, int]:
    """
    Parses text into a fresh context and returns it with the root id.

    The document must be a single object or array. Keyword arguments
    configure ParseConfig. On failure a JSONParseError is raised and no
    partially built context escapes.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON document must be str, not {type(text).__name__}"
        )
    config = ParseConfig(**kwargs)

    with ProfileContext("parse", len(text)):
        lexer = JsonLexer(text)
        tokens = lexer.tokenize()
        if not tokens:
            line, column = lexer.end_position
            raise JSONParseError(
                ParseErrorKind.EMPTY_STRING, "", line, column
            )

        first = tokens[0]
        if first.type is TokenType.OBJECT_START:
            context = JsonContext(root_object=True)
        elif first.type is TokenType.ARRAY_START:
            context = JsonContext(root_object=False)
        else:
            raise JSONParseError(
                ParseErrorKind.BAD_BEGINNING,
                first.value,
                first.line,
                first.column,
            )

        builder = JsonBuilder(tokens[1:], context, config, lexer.end_position)
        if context.root_object:
            builder.parse_object(context.root_id)
        else:
            builder.parse_array(context.root_id)

        trailing = builder.next_token()
        if trailing is not None:
            raise JSONParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                trailing.value,
                trailing.line,
                trailing.column,
            )

    logger.debug("parsed %d tokens into %r", len(tokens), context)
    return context, context.root_id
