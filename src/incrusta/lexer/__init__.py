"""Modular state-machine lexer for data URIs.

This package provides a single-pass lexer with O(n) guaranteed performance.
The position only moves forward, with one character of lookahead.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState
├── core.py              # Lexer class (mixin composition + navigation)
├── states.py            # LexerState enum
└── scanners/            # State-specific scanners
    ├── media.py         # data: prefix, type/subtype
    ├── params.py        # ;attr=value, ;attr="value", ;base64
    └── data.py          # , and the verbatim payload

Usage:
    >>> from incrusta.lexer import Lexer
    >>> for token in Lexer("data:,A%20brief%20note").tokenize():
    ...     print(token)
Token(PREFIX, 'data:', 0)
Token(DATA_COMMA, ',', 5)
Token(DATA, 'A%20brief%20note', 6)
Token(EOF, '', 22)

"""

from incrusta.lexer.core import Lexer
from incrusta.lexer.states import LexerState

__all__ = ["Lexer", "LexerState"]
