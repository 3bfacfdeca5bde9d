"""Lexer states.

This module defines the finite state machine states for the lexer.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerState(Enum):
    """Lexer states.

    The lexer moves forward through these states as it consumes the URI
    header; it never returns to an earlier state except for the parameter
    loop (AFTER_PARAM_VALUE -> PARAM_ATTR):
    - START: Expecting the ``data:`` prefix
    - MEDIA_TYPE / MEDIA_SUBTYPE: Scanning ``type/subtype``
    - PARAM_ATTR .. AFTER_PARAM_VALUE: Scanning ``;attr=value`` clauses
    - DATA_COMMA / DATA: The header terminator and the verbatim payload
    - ERROR / DONE: Terminal

    """

    START = auto()
    MEDIA_TYPE = auto()
    MEDIA_SUBTYPE = auto()
    PARAM_ATTR = auto()  # At ';': attribute, or the base64 marker
    PARAM_EQUALS = auto()
    PARAM_VALUE = auto()
    QUOTED_PARAM_VALUE = auto()
    AFTER_PARAM_VALUE = auto()
    DATA_COMMA = auto()
    DATA = auto()
    ERROR = auto()
    DONE = auto()


# States after which no more tokens are produced
TERMINAL_STATES = frozenset({LexerState.ERROR, LexerState.DONE})
