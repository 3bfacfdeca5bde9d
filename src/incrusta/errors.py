"""Exception classes for Incrusta.

Provides standardized exceptions for error handling throughout Incrusta.

Decode failures (malformed external input) all derive from DecodeError.
Construction precondition violations derive from ContractError, which is
also a ValueError, so callers can tell programmer errors apart from bad
input.
"""

from __future__ import annotations


class IncrustaError(Exception):
    """Base exception for all Incrusta errors.

    Subclass this for specific error categories.
    """

    pass


class DecodeError(IncrustaError):
    """Error while decoding a data URI.

    Raised when the input text cannot be turned into a DataURI.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize decode error with optional location.

        Args:
            message: Error description
            offset: Character offset in the source where the error occurred
        """
        self.message = message
        self.offset = offset

        location = f"offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class LexError(DecodeError):
    """Malformed structural token in the URI header.

    The string form is exactly the lexer's message (e.g.
    ``"invalid character for media type"``); the position is kept on
    ``offset``.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message, offset)
        self.args = (message,)

    def __str__(self) -> str:
        return self.message


class EscapeError(DecodeError):
    """Malformed ``%XX`` escape sequence."""

    pass


class Base64Error(DecodeError):
    """Payload is not valid standard-alphabet base64."""

    pass


class QuoteError(DecodeError):
    """Malformed backslash-escaped quoted parameter value."""

    pass


class ContractError(IncrustaError, ValueError):
    """Construction precondition violated.

    Raised by ``construct`` for a media type that is not ``type/subtype``
    or an odd number of parameter arguments. These indicate a bug in the
    calling code, not malformed input.
    """

    pass


class RenderError(IncrustaError):
    """Error while serializing a DataURI.

    Raised when the record holds a value the serializer cannot render,
    such as an unknown encoding.
    """

    pass
