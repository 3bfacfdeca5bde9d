"""
Incrusta — Data URI lexer, parser and serializer

Decodes RFC 2397 data URIs into typed records and renders records back to
canonical text. Features a hand-written O(n) state-machine lexer, exact
escape/unescape symmetry, and content sniffing for one-call encoding.

Quick Start:
    >>> from incrusta import decode, serialize
    >>> uri = decode("data:text/plain;charset=utf-8;base64,aGV5YQ==")
    >>> uri.content_type, uri.params, uri.data
    ('text/plain', {'charset': 'utf-8'}, b'heya')
    >>> serialize(uri)
    'data:text/plain;charset=utf-8;base64,aGV5YQ=='

    >>> # Build from bytes
    >>> from incrusta import construct, auto_encode
    >>> serialize(construct(b'{"msg": "heya"}', "application/json"))
    'data:application/json;base64,eyJtc2ciOiAiaGV5YSJ9'
    >>> auto_encode(b"A brief note")
    'data:text/plain;charset=utf-8;base64,QSBicmllZiBub3Rl'

Canonical Output:
    Serialization sorts parameters by key and percent-escapes their values
    instead of quoting them. ``serialize(decode(s))`` therefore carries the
    same type, parameters and payload as ``s`` but may be spelled
    differently.

Installation:
    pip install incrusta              # Core codec + content sniffing (filetype)
"""

from collections.abc import Iterable
from typing import IO, AnyStr

from incrusta.config import (
    CodecConfig,
    codec_config_context,
    get_codec_config,
    reset_codec_config,
    set_codec_config,
)
from incrusta.errors import (
    Base64Error,
    ContractError,
    DecodeError,
    EscapeError,
    IncrustaError,
    LexError,
    QuoteError,
    RenderError,
)
from incrusta.escape import escape, escape_string, unescape, unescape_to_string, unquote
from incrusta.factory import auto_encode, construct
from incrusta.lexer import Lexer, LexerState
from incrusta.nodes import DataURI, Encoding, MediaType
from incrusta.parser import Parser
from incrusta.renderers.protocol import URIRenderer
from incrusta.renderers.text import TextRenderer
from incrusta.serialization import from_dict, from_json, to_dict, to_json
from incrusta.sniff import detect_content_type
from incrusta.tokens import Token, TokenType

__version__ = "0.1.0"


def decode(text: str) -> DataURI:
    """Decode a data URI string.

    Args:
        text: Data URI text, starting with ``data:``

    Returns:
        Decoded DataURI

    Raises:
        DecodeError: The text is not a valid data URI. The concrete class
            (LexError, EscapeError, QuoteError, Base64Error) says why.

    Example:
        >>> decode("data:,A%20brief%20note").data
        b'A brief note'
    """
    return Parser(text).parse()


def decode_stream(reader: IO[AnyStr]) -> DataURI:
    """Read a whole stream and decode it as a data URI.

    Binary streams are decoded as UTF-8; undecodable bytes survive as
    surrogate escapes, so an ASCII payload keeps them byte for byte.

    Args:
        reader: Text or binary file-like object

    Returns:
        Decoded DataURI
    """
    raw = reader.read()
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", "surrogateescape")
    return decode(raw)


def serialize(uri: DataURI) -> str:
    """Render a DataURI as canonical data URI text.

    Example:
        >>> serialize(decode("data:text/plain;foo=\\"bar\\";charset=utf-8,hi"))
        'data:text/plain;charset=utf-8;foo=bar,hi'
    """
    return TextRenderer().render(uri)


class DataURICodec:
    """High-level codec bundling a CodecConfig.

    Usage:
        >>> codec = DataURICodec(CodecConfig(strict_base64=False))
        >>> codec("data:;base64,aGV5\\nYQ==").data
        b'heya'
        >>> codec.encode(b"A brief note")
        'data:text/plain;charset=utf-8;base64,QSBicmllZiBub3Rl'

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        DataURICodec instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize codec.

        Args:
            config: Configuration applied to every call (defaults if None)
        """
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def __call__(self, text: str) -> DataURI:
        """Decode a data URI (same as decode())."""
        return self.decode(text)

    def decode(self, text: str) -> DataURI:
        """Decode a data URI under this codec's configuration."""
        with codec_config_context(self._config):
            return Parser(text).parse()

    def decode_many(self, texts: Iterable[str]) -> list[DataURI]:
        """Decode several data URIs, setting the configuration once.

        Raises on the first invalid input; no partial list is returned.
        """
        with codec_config_context(self._config):
            return [Parser(text).parse() for text in texts]

    def encode(self, data: bytes) -> str:
        """Sniff the content type of data and render a base64 data URI."""
        with codec_config_context(self._config):
            return auto_encode(data)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "decode",
    "decode_stream",
    "serialize",
    "construct",
    "auto_encode",
    "detect_content_type",
    # Records
    "DataURI",
    "Encoding",
    "MediaType",
    # Escaping
    "escape",
    "escape_string",
    "unescape",
    "unescape_to_string",
    "unquote",
    # Parser components
    "Lexer",
    "LexerState",
    "Parser",
    "Token",
    "TokenType",
    # Renderer
    "TextRenderer",
    "URIRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "IncrustaError",
    "DecodeError",
    "LexError",
    "EscapeError",
    "QuoteError",
    "Base64Error",
    "ContractError",
    "RenderError",
    # Configuration (ContextVar-based)
    "CodecConfig",
    "get_codec_config",
    "set_codec_config",
    "reset_codec_config",
    "codec_config_context",
    # High-level
    "DataURICodec",
]
