"""State-machine lexer with O(n) guaranteed performance.

Scans the URI header one character class at a time and hands the payload
over verbatim. The position only moves forward; decisions use at most one
character of lookahead.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from incrusta.lexer.scanners import (
    DataScannerMixin,
    MediaTypeScannerMixin,
    ParamScannerMixin,
)
from incrusta.lexer.states import TERMINAL_STATES, LexerState
from incrusta.tokens import Token, TokenType
from incrusta.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Scanners (state-specific scanning logic)
    MediaTypeScannerMixin,
    ParamScannerMixin,
    DataScannerMixin,
):
    """State-machine lexer for data URIs.

    Each state scanner consumes a run of characters, yields zero or more
    tokens and selects the next state. The first lexical error yields a
    single ERROR token and ends the stream; otherwise the stream ends with
    EOF.

    Usage:
            >>> lexer = Lexer("data:text/plain;base64,aGV5YQ==")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(PREFIX, 'data:', 0)
        Token(MEDIA_TYPE, 'text', 5)
        Token(MEDIA_SEP, '/', 9)
        Token(MEDIA_SUBTYPE, 'plain', 10)
        Token(PARAM_SEMICOLON, ';', 15)
        Token(BASE64_MARKER, 'base64', 16)
        Token(DATA_COMMA, ',', 22)
        Token(DATA, 'aGV5YQ==', 23)
        Token(EOF, '', 31)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_start",  # Start of the token being scanned
        "_state",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Data URI text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._start = 0
        self._state = LexerState.START

    @property
    def state(self) -> LexerState:
        """Current state (terminal once tokenize() is exhausted)."""
        return self._state

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with EOF or ERROR

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        while self._state not in TERMINAL_STATES:
            yield from self._dispatch_state()

    def _dispatch_state(self) -> Iterator[Token]:
        """Dispatch to appropriate scanner based on current state.

        Yields:
            Token objects from the state-specific scanner.
        """
        state = self._state
        if state == LexerState.START:
            yield from self._scan_prefix()
        elif state == LexerState.MEDIA_TYPE:
            yield from self._scan_media_type()
        elif state == LexerState.MEDIA_SUBTYPE:
            yield from self._scan_media_subtype()
        elif state == LexerState.PARAM_ATTR:
            yield from self._scan_param_attr()
        elif state == LexerState.PARAM_EQUALS:
            yield from self._scan_param_equals()
        elif state == LexerState.PARAM_VALUE:
            yield from self._scan_param_value()
        elif state == LexerState.QUOTED_PARAM_VALUE:
            yield from self._scan_quoted_param_value()
        elif state == LexerState.AFTER_PARAM_VALUE:
            yield from self._scan_after_param_value()
        elif state == LexerState.DATA_COMMA:
            yield from self._scan_data_comma()
        elif state == LexerState.DATA:
            yield from self._scan_data()

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Returns:
            The consumed character.
        """
        if self._pos >= self._source_len:
            return ""
        char = self._source[self._pos]
        self._pos += 1
        return char

    def _scan_while(self, charset: frozenset[str]) -> int:
        """Advance over characters in charset.

        Returns:
            Number of characters consumed.
        """
        source = self._source
        source_len = self._source_len
        pos = self._pos
        while pos < source_len and source[pos] in charset:
            pos += 1
        consumed = pos - self._pos
        self._pos = pos
        return consumed

    def _pending(self) -> str:
        """Text scanned since the last emitted token."""
        return self._source[self._start : self._pos]

    def _transition_on(self, char: str) -> None:
        """Select the state following a header separator (``;`` or ``,``)."""
        if char == ";":
            self._state = LexerState.PARAM_ATTR
        else:
            self._state = LexerState.DATA_COMMA

    # =========================================================================
    # Token creation
    # =========================================================================

    def _emit(self, token_type: TokenType) -> Token:
        """Create a Token for the pending text and start the next one."""
        token = Token(
            type=token_type,
            value=self._source[self._start : self._pos],
            start=self._start,
            end=self._pos,
        )
        self._start = self._pos
        return token

    def _error(self, message: str) -> Token:
        """Create the terminal ERROR token and stop the state machine."""
        logger.debug("lexical error at offset %d: %s", self._pos, message)
        self._state = LexerState.ERROR
        return Token(type=TokenType.ERROR, value=message, start=self._pos, end=self._pos)
