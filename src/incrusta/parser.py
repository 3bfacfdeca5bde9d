"""Token-folding parser producing a DataURI.

Consumes the token stream from Lexer and fills in a DataURI record that
starts out as the defaults (``text/plain;charset=US-ASCII``, ASCII
encoding).

Architecture:
The grammar is flat, so the parser is a single loop over tokens with one
handler per token type. Per-parse state is limited to the pending
parameter attribute, whether the next value is quoted, and the selected
payload decoder.

Thread Safety:
- Parser instances are single-use; create one per decode
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

import base64
import re
from collections.abc import Callable, Iterator

from incrusta.config import CodecConfig, get_codec_config
from incrusta.errors import Base64Error, DecodeError, LexError
from incrusta.escape import unescape, unescape_to_string, unquote
from incrusta.lexer import Lexer
from incrusta.nodes import DataURI, Encoding, MediaType
from incrusta.tokens import Token, TokenType
from incrusta.utils.logger import get_logger

logger = get_logger(__name__)

PayloadDecoder = Callable[[str], bytes]

# Anything that cannot appear in standard-alphabet base64
_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/=]")


def decode_ascii_payload(text: str) -> bytes:
    """Decode a percent-escaped payload."""
    return unescape(text)


def decode_base64_payload(text: str) -> bytes:
    """Decode a standard-alphabet, padded base64 payload.

    With ``strict_base64`` disabled in the active config, characters outside
    the alphabet (line breaks from folded URIs, for example) are dropped
    first.

    Raises:
        Base64Error: Invalid characters or incorrect padding.
    """
    strict = get_codec_config().strict_base64
    if not strict:
        text = _NON_BASE64.sub("", text)
    try:
        return base64.b64decode(text, validate=strict)
    except ValueError as e:
        raise Base64Error(f"invalid base64 payload: {e}") from e


class Parser:
    """Parser for data URIs.

    Consumes tokens from Lexer and builds a DataURI.

    Usage:
            >>> parser = Parser("data:text/plain;charset=utf-8;base64,aGV5YQ==")
            >>> uri = parser.parse()
            >>> uri.media_type
        MediaType(type='text', subtype='plain', params={'charset': 'utf-8'})
            >>> uri.data
        b'heya'

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = (
        "_source",
        "_uri",
        "_current_attr",
        "_quoted",
        "_payload_decoder",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_codec_config() or codec_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Data URI text

        """
        self._source = source
        self._uri = DataURI(media_type=MediaType.default(self._config.default_charset))
        self._current_attr = ""
        self._quoted = False
        self._payload_decoder: PayloadDecoder | None = None

    @property
    def _config(self) -> CodecConfig:
        """Get current codec configuration (thread-local)."""
        return get_codec_config()

    def parse(self) -> DataURI:
        """Parse source into a DataURI.

        Returns:
            The decoded record

        Raises:
            LexError: Malformed header (message is the lexer's)
            EscapeError: Malformed ``%XX`` sequence
            QuoteError: Malformed quoted parameter value
            Base64Error: Invalid base64 payload
            DecodeError: Input longer than the configured maximum
            RuntimeError: Token stream ended without EOF (lexer bug)

        """
        limit = self._config.max_input_length
        if limit is not None and len(self._source) > limit:
            raise DecodeError(f"input length {len(self._source)} exceeds limit {limit}")

        return self._parse_tokens(Lexer(self._source).tokenize())

    def _parse_tokens(self, tokens: Iterator[Token]) -> DataURI:
        """Fold tokens into the record until EOF or ERROR."""
        for token in tokens:
            token_type = token.type
            if token_type == TokenType.ERROR:
                raise LexError(token.value, offset=token.start)
            elif token_type == TokenType.MEDIA_TYPE:
                self._uri.media_type.type = token.value
                # An explicit media type drops the implied charset
                self._uri.media_type.params.pop("charset", None)
            elif token_type == TokenType.MEDIA_SUBTYPE:
                self._uri.media_type.subtype = token.value
            elif token_type == TokenType.PARAM_ATTR:
                self._current_attr = token.value
                # Present even when no PARAM_VAL follows (empty value)
                self._uri.media_type.params[token.value] = ""
            elif token_type == TokenType.LEFT_QUOTE:
                self._quoted = True
            elif token_type == TokenType.RIGHT_QUOTE:
                self._quoted = False
            elif token_type == TokenType.PARAM_VAL:
                self._uri.media_type.params[self._current_attr] = self._param_value(token)
            elif token_type == TokenType.BASE64_MARKER:
                self._uri.encoding = Encoding.BASE64
                self._payload_decoder = decode_base64_payload
            elif token_type == TokenType.DATA_COMMA:
                if self._payload_decoder is None:
                    self._payload_decoder = decode_ascii_payload
            elif token_type == TokenType.DATA:
                self._uri.data = self._decode_payload(token)
            elif token_type == TokenType.EOF:
                return self._uri

        raise RuntimeError("token stream ended without EOF")

    def _param_value(self, token: Token) -> str:
        """Unquote or unescape a raw parameter value."""
        try:
            if self._quoted:
                return unquote(token.value)
            return unescape_to_string(token.value)
        except DecodeError as e:
            raise _relocate(e, token.start) from e

    def _decode_payload(self, token: Token) -> bytes:
        """Run the selected payload decoder over the DATA token."""
        decoder = self._payload_decoder
        if decoder is None:
            raise RuntimeError("DATA token before DATA_COMMA")
        try:
            return decoder(token.value)
        except DecodeError as e:
            logger.debug("payload decode failed at offset %d: %s", token.start, e.message)
            raise _relocate(e, token.start) from e


def _relocate(error: DecodeError, base: int) -> DecodeError:
    """Copy a token-relative error, with its offset moved into the whole URI."""
    offset = base if error.offset is None else base + error.offset
    return type(error)(error.message, offset=offset)
