"""URIRenderer protocol — stable interface for DataURI renderers.

Any renderer that implements ``render(uri) -> str`` conforms to this protocol.
The built-in ``TextRenderer`` is the reference implementation.

Example:
    from incrusta.renderers.protocol import URIRenderer

    def embed(renderer: URIRenderer, uri: DataURI) -> str:
        return f'<img src="{renderer.render(uri)}">'

"""

from typing import Protocol

from incrusta.nodes import DataURI


class URIRenderer(Protocol):
    """Protocol for DataURI renderers.

    Implementations must accept a DataURI and return a rendered string.
    The built-in ``TextRenderer`` conforms to this protocol.

    """

    def render(self, uri: DataURI) -> str:
        """Render a DataURI to a string.

        Args:
            uri: The record to render.

        Returns:
            Rendered string output.

        """
        ...
