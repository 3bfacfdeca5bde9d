"""Renderers for DataURI records."""

from incrusta.renderers.protocol import URIRenderer
from incrusta.renderers.text import TextRenderer

__all__ = ["TextRenderer", "URIRenderer"]
