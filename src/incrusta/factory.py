"""Convenience constructors for DataURI records.

construct() builds a record from raw bytes and a ``type/subtype`` string;
auto_encode() sniffs the content type and serializes in one step.

Both treat their arguments as trusted: a malformed media type or an odd
number of parameter arguments raises ContractError immediately rather than
a DecodeError.
"""

from __future__ import annotations

from incrusta.charsets import MEDIA_SEP, PARAM_EQUAL, PARAM_SEMICOLON, TOKEN_CHARS
from incrusta.config import get_codec_config
from incrusta.errors import ContractError
from incrusta.nodes import DataURI, Encoding, MediaType
from incrusta.renderers.text import TextRenderer
from incrusta.sniff import detect_content_type
from incrusta.utils.logger import get_logger

logger = get_logger(__name__)


def construct(data: bytes, media_type: str, *param_pairs: str) -> DataURI:
    """Build a base64-encoded DataURI.

    Args:
        data: Payload bytes
        media_type: ``type/subtype``
        *param_pairs: Flat ``key, value, key, value, ...`` parameter list

    Returns:
        New DataURI with Base64 encoding

    Raises:
        ContractError: media_type is not exactly two non-empty parts, a
            type, subtype or parameter key has characters outside the token
            alphabet, or param_pairs has odd length.

    Example:
        >>> uri = construct(b"heya", "text/plain", "charset", "utf-8")
        >>> str(uri)
        'data:text/plain;charset=utf-8;base64,aGV5YQ=='
    """
    parts = media_type.split(MEDIA_SEP)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ContractError(f"invalid media type {media_type!r}")
    if len(param_pairs) % 2 != 0:
        raise ContractError("requires an even number of param pairs")

    params = dict(zip(param_pairs[::2], param_pairs[1::2]))
    for name in (*parts, *params):
        if not _is_token(name):
            raise ContractError(f"invalid token {name!r}")
    return DataURI(
        media_type=MediaType(parts[0], parts[1], params),
        encoding=Encoding.BASE64,
        data=bytes(data),
    )


def _is_token(name: str) -> bool:
    return bool(name) and all(c in TOKEN_CHARS for c in name)


def auto_encode(data: bytes) -> str:
    """Encode bytes as a base64 data URI with a sniffed media type.

    The detector comes from the active CodecConfig (``sniffer``), falling
    back to incrusta.sniff.detect_content_type.

    Example:
        >>> auto_encode(b"A brief note")
        'data:text/plain;charset=utf-8;base64,QSBicmllZiBub3Rl'
    """
    sniffer = get_codec_config().sniffer or detect_content_type
    content_type = sniffer(data).replace("; ", ";")
    logger.debug("sniffed %s for %d bytes", content_type, len(data))

    media_type, *params = content_type.split(PARAM_SEMICOLON)
    pairs: list[str] = []
    for param in params:
        key, sep, value = param.partition(PARAM_EQUAL)
        if not sep:
            raise ContractError(f"invalid parameter {param!r} in {content_type!r}")
        pairs += (key, value)

    return TextRenderer().render(construct(data, media_type, *pairs))
