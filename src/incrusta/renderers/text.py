"""Canonical data URI text renderer.

Renders a DataURI as:

    data:<type>/<subtype>[;<key>=<escaped value>]*[;base64],<payload>

Parameters are emitted in ascending key order and always percent-escaped,
never quoted, so decoding and re-rendering converges on one spelling.

Thread Safety:
TextRenderer holds no state. Multiple threads can share one instance.
"""

from __future__ import annotations

import base64
from typing import TextIO

from incrusta.charsets import BASE64_MARKER, DATA_COMMA, DATA_PREFIX, PARAM_SEMICOLON
from incrusta.errors import RenderError
from incrusta.escape import escape
from incrusta.nodes import DataURI, Encoding


class TextRenderer:
    """Render DataURI records to canonical text.

    Usage:
            >>> from incrusta.factory import construct
            >>> TextRenderer().render(construct(b"heya", "text/plain"))
        'data:text/plain;base64,aGV5YQ=='

    """

    __slots__ = ()

    def render(self, uri: DataURI) -> str:
        """Render a DataURI to text.

        Raises:
            RenderError: The record's encoding is not an Encoding member.
        """
        parts = [DATA_PREFIX, str(uri.media_type)]
        if uri.encoding is Encoding.BASE64:
            parts.append(PARAM_SEMICOLON + BASE64_MARKER)
        parts.append(DATA_COMMA)
        parts.append(self._encode_payload(uri))
        return "".join(parts)

    def write(self, uri: DataURI, out: TextIO) -> int:
        """Render a DataURI into a text stream.

        Returns:
            Number of characters written
        """
        return out.write(self.render(uri))

    def _encode_payload(self, uri: DataURI) -> str:
        if uri.encoding is Encoding.BASE64:
            return base64.b64encode(uri.data).decode("ascii")
        if uri.encoding is Encoding.ASCII:
            return escape(uri.data)
        raise RenderError(f"invalid encoding {uri.encoding!r}")
