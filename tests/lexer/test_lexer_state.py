"""Tests ensuring lexer state is consistent after tokenization.

These tests verify that the lexer ends in the right terminal state and
that its token stream is a one-shot iterator.
"""

from __future__ import annotations

from incrusta.lexer import Lexer, LexerState
from incrusta.tokens import TokenType


class TestTerminalState:
    """Verify the state machine stops where it should."""

    def test_initial_state_is_start(self) -> None:
        assert Lexer("data:,").state == LexerState.START

    def test_done_after_valid_input(self) -> None:
        lexer = Lexer("data:text/plain,hello")
        list(lexer.tokenize())
        assert lexer.state == LexerState.DONE

    def test_done_when_eof_is_yielded(self) -> None:
        """Consumers that stop at EOF still see a terminal state."""
        lexer = Lexer("data:,hello")
        for token in lexer.tokenize():
            if token.type == TokenType.EOF:
                break
        assert lexer.state == LexerState.DONE

    def test_error_after_invalid_input(self) -> None:
        lexer = Lexer("data:xxx,hello")
        list(lexer.tokenize())
        assert lexer.state == LexerState.ERROR

    def test_position_at_end_after_data(self) -> None:
        source = "data:,abc"
        lexer = Lexer(source)
        list(lexer.tokenize())
        assert lexer._pos == len(source)


class TestLaziness:
    """The token stream is produced on demand and not restartable."""

    def test_tokens_produced_one_at_a_time(self) -> None:
        lexer = Lexer("data:text/plain,hello")
        stream = lexer.tokenize()

        first = next(stream)
        assert first.type == TokenType.PREFIX
        # Nothing past the prefix has been scanned yet
        assert lexer._pos == len("data:")

    def test_second_tokenize_yields_nothing(self) -> None:
        lexer = Lexer("data:,x")
        assert list(lexer.tokenize())
        assert list(lexer.tokenize()) == []

    def test_exhausted_iterator_stays_exhausted(self) -> None:
        stream = Lexer("data:,x").tokenize()
        list(stream)
        assert list(stream) == []


class TestTokenRepr:
    """Verify compact Token repr."""

    def test_repr_truncates_long_values(self) -> None:
        tokens = list(Lexer("data:," + "A" * 40).tokenize())
        data = tokens[-2]
        assert data.type == TokenType.DATA
        assert "..." in repr(data)
        assert repr(data).startswith("Token(DATA, ")

    def test_terminal_flag(self) -> None:
        tokens = list(Lexer("data:,x").tokenize())
        assert [t.is_terminal for t in tokens] == [False, False, False, True]
