"""Data scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from incrusta.lexer.states import LexerState
from incrusta.tokens import Token, TokenType


class DataScannerMixin:
    """Mixin scanning the header terminator and the payload.

    Everything after the first header-ending comma is payload and is
    emitted as one DATA token with no further interpretation (commas
    included).

    """

    # These will be set by the Lexer class
    _source_len: int
    _pos: int
    _state: LexerState

    def _advance(self) -> str:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _scan_data_comma(self) -> Iterator[Token]:
        """Scan the single ``,`` that ends the header."""
        self._advance()
        yield self._emit(TokenType.DATA_COMMA)
        self._state = LexerState.DATA

    def _scan_data(self) -> Iterator[Token]:
        """Emit the rest of the input verbatim, then EOF."""
        if self._pos < self._source_len:
            self._pos = self._source_len
            yield self._emit(TokenType.DATA)
        self._state = LexerState.DONE
        yield self._emit(TokenType.EOF)
