"""Percent-escaping and quoted-string routines.

Shared by the parser (unescaping parameter values and ASCII payloads) and
the renderer (escaping them back). The two sides must agree exactly:

    unescape(escape(data)) == data      # for every byte sequence

escape() is not the identity on already-escaped text: "%41" escapes to
"%2541", so unescaping is never applied twice.

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from urllib.parse import quote_from_bytes

from incrusta.charsets import BACKSLASH, ESCAPE_SAFE_MARKS, HEX_DIGITS
from incrusta.errors import EscapeError, QuoteError


def escape(data: bytes) -> str:
    """Escape bytes into the URI-safe alphabet.

    Unreserved bytes (ASCII letters, digits and ``-_.!~*'()``) are copied;
    every other byte, including all bytes >= 0x80, becomes ``%XX`` with
    uppercase hex digits.

    Args:
        data: Raw bytes

    Returns:
        ASCII-only escaped string

    Example:
        >>> escape(b"A brief note")
        'A%20brief%20note'
    """
    return quote_from_bytes(data, safe=ESCAPE_SAFE_MARKS)


def escape_string(text: str) -> str:
    """Escape a string via its UTF-8 encoding."""
    return escape(text.encode("utf-8", "surrogateescape"))


def unescape(text: str) -> bytes:
    """Decode ``%XX`` triplets, copying everything else literally.

    Characters outside ASCII are copied as their UTF-8 bytes.

    Args:
        text: Escaped text

    Returns:
        Decoded bytes

    Raises:
        EscapeError: A ``%`` is not followed by two hex digits, or the text
            holds a lone surrogate with no byte value.
    """
    out = bytearray()
    pos = 0
    text_len = len(text)
    while pos < text_len:
        idx = text.find("%", pos)
        if idx == -1:
            out += _encode_run(text, pos, text_len)
            break
        if idx > pos:
            out += _encode_run(text, pos, idx)

        triplet = text[idx : idx + 3]
        if len(triplet) < 3 or triplet[1] not in HEX_DIGITS or triplet[2] not in HEX_DIGITS:
            raise EscapeError(f"invalid escape sequence {triplet!r}", offset=idx)
        out.append(int(triplet[1:], 16))
        pos = idx + 3
    return bytes(out)


def _encode_run(text: str, start: int, end: int) -> bytes:
    """UTF-8 bytes of text[start:end]; surrogateescape restores raw bytes."""
    try:
        return text[start:end].encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as e:
        raise EscapeError(
            f"unencodable character {text[start + e.start]!r}", offset=start + e.start
        ) from e


def unescape_to_string(text: str) -> str:
    """Unescape and decode as UTF-8.

    Undecodable bytes are kept as surrogate escapes, so escape_string()
    restores them exactly.
    """
    return unescape(text).decode("utf-8", "surrogateescape")


def unquote(text: str) -> str:
    """Unescape the interior of a quoted parameter value.

    A backslash makes the following character literal: ``\\"`` is a quote,
    ``\\\\`` a backslash, ``\\n`` the letter n.

    Args:
        text: Raw text between the quotes

    Returns:
        Value with escapes removed

    Raises:
        QuoteError: The text ends with a lone backslash.
    """
    if BACKSLASH not in text:
        return text

    result: list[str] = []
    pos = 0
    text_len = len(text)
    while pos < text_len:
        char = text[pos]
        if char == BACKSLASH:
            if pos + 1 >= text_len:
                raise QuoteError("trailing backslash in quoted string", offset=pos)
            result.append(text[pos + 1])
            pos += 2
        else:
            result.append(char)
            pos += 1
    return "".join(result)


__all__ = [
    "escape",
    "escape_string",
    "unescape",
    "unescape_to_string",
    "unquote",
]
