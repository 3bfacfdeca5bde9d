"""Content-type detection for auto_encode.

Thin adapter over the ``filetype`` library, which recognizes binary formats
by their magic numbers. Input it does not recognize falls back to the two
generic types: UTF-8 text without control bytes is
``text/plain; charset=utf-8``, anything else is ``application/octet-stream``.

The returned string may contain ``"; "`` between parameters, as HTTP
Content-Type values do; auto_encode normalizes it.
"""

from __future__ import annotations

import filetype

from incrusta.utils.logger import get_logger

logger = get_logger(__name__)

TEXT_PLAIN_UTF8 = "text/plain; charset=utf-8"
OCTET_STREAM = "application/octet-stream"

# Control bytes that mark content as binary (tab, LF, FF, CR and ESC allowed)
_BINARY_BYTES: frozenset[int] = frozenset(
    [*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)]
)


def detect_content_type(data: bytes) -> str:
    """Detect the content type of raw bytes.

    Args:
        data: Raw payload

    Returns:
        ``type/subtype``, possibly followed by ``; key=value`` parameters

    Example:
        >>> detect_content_type(b"\\x89PNG\\r\\n\\x1a\\n" + bytes(32))
        'image/png'
        >>> detect_content_type(b"A brief note")
        'text/plain; charset=utf-8'
    """
    mime = filetype.guess_mime(data) if data else None
    if mime is not None:
        return mime

    if _looks_like_text(data):
        return TEXT_PLAIN_UTF8
    logger.debug("no signature matched %d bytes, using %s", len(data), OCTET_STREAM)
    return OCTET_STREAM


def _looks_like_text(data: bytes) -> bool:
    if any(b in _BINARY_BYTES for b in data):
        return False
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True
