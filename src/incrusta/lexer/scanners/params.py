"""Parameter scanner mixin.

Scans the ``;attr=value`` clauses of the header, and the ``;base64``
marker that ends them. Values come in two forms:

    ;name=golang%20favicon      percent-escaped token
    ;foo="b\\"<@>\\"r"          quoted string with backslash escapes

Values are emitted raw; unescaping is the parser's job.
"""

from __future__ import annotations

from collections.abc import Iterator

from incrusta.charsets import (
    BACKSLASH,
    BASE64_MARKER,
    DATA_COMMA,
    PARAM_EQUAL,
    PARAM_SEMICOLON,
    PARAM_VALUE_CHARS,
    QUOTE,
    QUOTED_CHARS,
    TOKEN_CHARS,
)
from incrusta.lexer.states import LexerState
from incrusta.tokens import Token, TokenType


class ParamScannerMixin:
    """Mixin providing parameter scanning logic."""

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _start: int
    _state: LexerState

    def _peek(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _scan_while(self, charset: frozenset[str]) -> int:
        raise NotImplementedError

    def _pending(self) -> str:
        raise NotImplementedError

    def _transition_on(self, char: str) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _error(self, message: str) -> Token:
        raise NotImplementedError

    def _scan_param_attr(self) -> Iterator[Token]:
        """Scan ``;`` and the attribute (or base64 marker) after it.

        An attribute followed by ``,`` instead of ``=`` can only be the
        base64 marker.
        """
        self._advance()
        yield self._emit(TokenType.PARAM_SEMICOLON)

        consumed = self._scan_while(TOKEN_CHARS)
        char = self._peek()

        if not consumed:
            if char == "":
                yield self._error("unterminated parameter sequence")
            else:
                yield self._error("invalid character for parameter attribute")
            return

        if char == DATA_COMMA:
            if self._pending() != BASE64_MARKER:
                yield self._error("expected base64 encoding marker")
                return
            yield self._emit(TokenType.BASE64_MARKER)
            self._state = LexerState.DATA_COMMA
        elif char == PARAM_EQUAL:
            yield self._emit(TokenType.PARAM_ATTR)
            self._state = LexerState.PARAM_EQUALS
        elif char == "":
            yield self._error("unterminated parameter sequence")
        else:
            yield self._error("invalid character for parameter attribute")

    def _scan_param_equals(self) -> Iterator[Token]:
        """Scan ``=`` and pick the value form from the next character."""
        self._advance()
        yield self._emit(TokenType.PARAM_EQUAL)
        if self._peek() == QUOTE:
            self._state = LexerState.QUOTED_PARAM_VALUE
        else:
            self._state = LexerState.PARAM_VALUE

    def _scan_param_value(self) -> Iterator[Token]:
        """Scan an unquoted (percent-escaped) value. May be empty."""
        if self._scan_while(PARAM_VALUE_CHARS):
            yield self._emit(TokenType.PARAM_VAL)
        self._state = LexerState.AFTER_PARAM_VALUE

    def _scan_quoted_param_value(self) -> Iterator[Token]:
        """Scan a quoted value up to the first unescaped closing quote.

        The interior is emitted verbatim as PARAM_VAL between LEFT_QUOTE
        and RIGHT_QUOTE; an empty interior emits no PARAM_VAL.
        """
        self._advance()
        yield self._emit(TokenType.LEFT_QUOTE)

        while True:
            char = self._peek()
            if char == QUOTE:
                break
            if char == "":
                yield self._error("unterminated quoted string")
                return
            if char == BACKSLASH:
                self._advance()
                char = self._peek()
                if char == "":
                    yield self._error("unterminated quoted string")
                    return
            if char not in QUOTED_CHARS:
                yield self._error("invalid character in quoted string")
                return
            self._advance()

        if self._pos > self._start:
            yield self._emit(TokenType.PARAM_VAL)
        self._advance()
        yield self._emit(TokenType.RIGHT_QUOTE)
        self._state = LexerState.AFTER_PARAM_VALUE

    def _scan_after_param_value(self) -> Iterator[Token]:
        """Expect ``;`` (next parameter) or ``,`` (end of header)."""
        char = self._peek()
        if char == PARAM_SEMICOLON or char == DATA_COMMA:
            self._transition_on(char)
            return
        if char == "":
            yield self._error("missing comma before data")
        else:
            yield self._error("expected semicolon or comma")
