"""Prefix and media type scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from incrusta.charsets import (
    DATA_COMMA,
    DATA_PREFIX,
    MEDIA_SEP,
    PARAM_SEMICOLON,
    TOKEN_CHARS,
)
from incrusta.lexer.states import LexerState
from incrusta.tokens import Token, TokenType


class MediaTypeScannerMixin:
    """Mixin scanning ``data:`` and the optional ``type/subtype``.

    An absent media type (``data:;...`` or ``data:,...``) produces no
    MEDIA_TYPE/MEDIA_SUBTYPE tokens, which leaves the parser's defaults
    in place.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _start: int
    _state: LexerState

    def _peek(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _scan_while(self, charset: frozenset[str]) -> int:
        raise NotImplementedError

    def _transition_on(self, char: str) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _error(self, message: str) -> Token:
        raise NotImplementedError

    def _scan_prefix(self) -> Iterator[Token]:
        """Scan the literal ``data:`` prefix (case-sensitive)."""
        if not self._source.startswith(DATA_PREFIX):
            yield self._error("missing data prefix")
            return
        self._pos = len(DATA_PREFIX)
        yield self._emit(TokenType.PREFIX)
        self._state = LexerState.MEDIA_TYPE

    def _scan_media_type(self) -> Iterator[Token]:
        """Scan the media type up to and including ``/``."""
        char = self._peek()
        if char == PARAM_SEMICOLON or char == DATA_COMMA:
            # No explicit media type
            self._transition_on(char)
            return
        if char == "":
            yield self._error("missing comma before data")
            return

        self._scan_while(TOKEN_CHARS)
        if self._pos == self._start or self._peek() != MEDIA_SEP:
            yield self._error("invalid character for media type")
            return
        yield self._emit(TokenType.MEDIA_TYPE)

        self._advance()
        yield self._emit(TokenType.MEDIA_SEP)
        self._state = LexerState.MEDIA_SUBTYPE

    def _scan_media_subtype(self) -> Iterator[Token]:
        """Scan the media subtype; it must be followed by ``;`` or ``,``."""
        consumed = self._scan_while(TOKEN_CHARS)
        char = self._peek()

        if char == "":
            yield self._error("missing comma before data")
            return
        if char != PARAM_SEMICOLON and char != DATA_COMMA:
            yield self._error("invalid character for media subtype")
            return
        if not consumed:
            yield self._error("missing media subtype")
            return

        yield self._emit(TokenType.MEDIA_SUBTYPE)
        self._transition_on(char)
