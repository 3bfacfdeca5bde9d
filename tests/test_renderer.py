"""Tests for the canonical TextRenderer."""

import io

import pytest

from incrusta import DataURI, Encoding, MediaType
from incrusta.errors import RenderError
from incrusta.renderers import TextRenderer, URIRenderer


def _uri(params: dict[str, str], encoding: Encoding, data: bytes) -> DataURI:
    return DataURI(MediaType("text", "plain", params), encoding, data)


class TestTextRenderer:
    """Verify the canonical text form."""

    def test_base64(self) -> None:
        uri = _uri({}, Encoding.BASE64, b"heya")
        assert TextRenderer().render(uri) == "data:text/plain;base64,aGV5YQ=="

    def test_ascii(self) -> None:
        uri = _uri({}, Encoding.ASCII, b"A brief note")
        assert TextRenderer().render(uri) == "data:text/plain,A%20brief%20note"

    def test_params_sorted(self) -> None:
        uri = _uri({"zeta": "1", "alpha": "2", "charset": "utf-8"}, Encoding.ASCII, b"")
        assert TextRenderer().render(uri) == "data:text/plain;alpha=2;charset=utf-8;zeta=1,"

    def test_param_values_escaped_not_quoted(self) -> None:
        uri = _uri({"foo": 'b"<@>"r'}, Encoding.BASE64, b"")
        assert TextRenderer().render(uri) == "data:text/plain;foo=b%22%3C%40%3E%22r;base64,"

    def test_empty_payload(self) -> None:
        assert TextRenderer().render(_uri({}, Encoding.BASE64, b"")) == "data:text/plain;base64,"

    def test_binary_ascii_payload(self) -> None:
        uri = _uri({}, Encoding.ASCII, b"\x00\xff")
        assert TextRenderer().render(uri) == "data:text/plain,%00%FF"

    def test_invalid_encoding(self) -> None:
        uri = _uri({}, Encoding.BASE64, b"")
        uri.encoding = "base32"  # type: ignore[assignment]
        with pytest.raises(RenderError, match="invalid encoding"):
            TextRenderer().render(uri)

    def test_write_to_stream(self) -> None:
        out = io.StringIO()
        uri = _uri({"charset": "utf-8"}, Encoding.BASE64, b"heya")
        written = TextRenderer().write(uri, out)
        assert out.getvalue() == "data:text/plain;charset=utf-8;base64,aGV5YQ=="
        assert written == len(out.getvalue())

    def test_conforms_to_protocol(self) -> None:
        renderer: URIRenderer = TextRenderer()
        assert renderer.render(_uri({}, Encoding.ASCII, b"x")) == "data:text/plain,x"


class TestMediaTypeString:
    """Verify MediaType formatting helpers."""

    def test_content_type(self) -> None:
        assert MediaType("image", "png").content_type == "image/png"

    def test_str(self) -> None:
        mt = MediaType("text", "plain", {"b": "2 3", "a": "1"})
        assert str(mt) == "text/plain;a=1;b=2%203"

    def test_default(self) -> None:
        assert MediaType.default() == MediaType("text", "plain", {"charset": "US-ASCII"})
        assert MediaType.default("utf-8").params == {"charset": "utf-8"}
