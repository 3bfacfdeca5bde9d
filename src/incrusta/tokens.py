"""Token and TokenType definitions for the Incrusta lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, value, and source offsets.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Listed in the order they can appear in a data URI:
    ``data:type/subtype;attr=value;attr="value";base64,payload``

    """

    PREFIX = auto()  # data:
    MEDIA_TYPE = auto()  # text
    MEDIA_SEP = auto()  # /
    MEDIA_SUBTYPE = auto()  # plain

    # Parameters
    PARAM_SEMICOLON = auto()  # ;
    PARAM_ATTR = auto()  # charset
    PARAM_EQUAL = auto()  # =
    LEFT_QUOTE = auto()  # "
    PARAM_VAL = auto()  # utf-8 (raw, still escaped or quoted)
    RIGHT_QUOTE = auto()  # "

    BASE64_MARKER = auto()  # base64
    DATA_COMMA = auto()  # ,
    DATA = auto()  # payload, verbatim

    # Terminals
    EOF = auto()
    ERROR = auto()  # value holds the message


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Tokens are the atomic units passed from lexer to parser.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source (the message for ERROR)
        start: Start offset in source
        end: End offset in source (exclusive)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start})"

    @property
    def is_terminal(self) -> bool:
        """Whether this token ends the stream."""
        return self.type is TokenType.EOF or self.type is TokenType.ERROR
