"""Typed records for decoded data URIs.

A DataURI is what the parser builds and what the renderer consumes:

    DataURI
    ├── media_type: MediaType(type, subtype, params)
    ├── encoding:   Encoding.BASE64 | Encoding.ASCII
    └── data:       bytes

Records are plain mutable values. Callers may edit ``params`` or replace
``data`` before serializing again; nothing is shared between decodes.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from incrusta.escape import escape_string

DEFAULT_TYPE = "text"
DEFAULT_SUBTYPE = "plain"
DEFAULT_CHARSET = "US-ASCII"


class Encoding(Enum):
    """Payload encoding of a data URI."""

    BASE64 = "base64"
    ASCII = "ascii"  # percent-escaped


@dataclass(slots=True)
class MediaType:
    """A ``type/subtype`` pair plus parameters.

    Attributes:
        type: Top-level type (e.g. ``text``)
        subtype: Subtype (e.g. ``plain``)
        params: Parameter map; serialized in sorted key order

    Example:
        >>> mt = MediaType("text", "plain", {"charset": "utf-8"})
        >>> mt.content_type
        'text/plain'
        >>> str(mt)
        'text/plain;charset=utf-8'

    """

    type: str
    subtype: str
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls, charset: str = DEFAULT_CHARSET) -> MediaType:
        """The media type implied when a data URI declares none."""
        return cls(DEFAULT_TYPE, DEFAULT_SUBTYPE, {"charset": charset})

    @property
    def content_type(self) -> str:
        """The ``type/subtype`` string, without parameters."""
        return f"{self.type}/{self.subtype}"

    def __str__(self) -> str:
        """Canonical form: parameters sorted and percent-escaped, never quoted."""
        params = "".join(
            f";{key}={escape_string(self.params[key])}" for key in sorted(self.params)
        )
        return self.content_type + params


@dataclass(slots=True)
class DataURI:
    """A decoded data URI.

    Attributes:
        media_type: Media type and parameters of the payload
        encoding: Payload encoding used when serializing
        data: Payload bytes (never None; empty payload is ``b""``)

    """

    media_type: MediaType = field(default_factory=MediaType.default)
    encoding: Encoding = Encoding.ASCII
    data: bytes = b""

    @property
    def type(self) -> str:
        return self.media_type.type

    @property
    def subtype(self) -> str:
        return self.media_type.subtype

    @property
    def params(self) -> dict[str, str]:
        return self.media_type.params

    @property
    def content_type(self) -> str:
        """The ``type/subtype`` string of the payload."""
        return self.media_type.content_type

    def __str__(self) -> str:
        """Canonical data URI text (see ``incrusta.serialize``)."""
        from incrusta.renderers.text import TextRenderer

        return TextRenderer().render(self)
