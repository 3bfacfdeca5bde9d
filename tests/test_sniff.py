"""Tests for the content-type detection adapter."""

import pytest

from incrusta.sniff import OCTET_STREAM, TEXT_PLAIN_UTF8, detect_content_type


class TestDetectContentType:
    """Verify signature matches and generic fallbacks."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\x89PNG\r\n\x1a\n" + bytes(32), "image/png"),
            (b"GIF89a" + bytes(16), "image/gif"),
            (b"%PDF-1.7\n" + bytes(16), "application/pdf"),
            (b"\x00\x00\x01\x00\x01\x00\x10\x10" + bytes(16), "image/x-icon"),
        ],
    )
    def test_signatures(self, data: bytes, expected: str) -> None:
        assert detect_content_type(data) == expected

    def test_text(self) -> None:
        assert detect_content_type(b"A brief note\n") == TEXT_PLAIN_UTF8

    def test_utf8_text(self) -> None:
        assert detect_content_type("héllo wörld".encode()) == TEXT_PLAIN_UTF8

    def test_empty_is_text(self) -> None:
        assert detect_content_type(b"") == TEXT_PLAIN_UTF8

    def test_control_bytes_are_binary(self) -> None:
        assert detect_content_type(b"abc\x00def") == OCTET_STREAM

    def test_invalid_utf8_is_binary(self) -> None:
        assert detect_content_type(b"\xff\xfe\xfd") == OCTET_STREAM
