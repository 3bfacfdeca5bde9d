"""Tests for ContextVar-based codec configuration.

Validates thread isolation, context manager behavior, and how each option
changes decoding.
"""

from threading import Thread

import pytest

from incrusta import (
    CodecConfig,
    DataURICodec,
    decode,
    get_codec_config,
    reset_codec_config,
    set_codec_config,
)
from incrusta.config import codec_config_context
from incrusta.errors import Base64Error, DecodeError


class TestCodecConfigDataclass:
    """Test CodecConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Defaults match plain decode() behavior."""
        config = CodecConfig()
        assert config.default_charset == "US-ASCII"
        assert config.strict_base64 is True
        assert config.max_input_length is None
        assert config.sniffer is None

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = CodecConfig()
        with pytest.raises(AttributeError):
            config.strict_base64 = False  # type: ignore[misc]

    def test_from_dict(self) -> None:
        """Known keys are applied, unknown keys ignored."""
        config = CodecConfig.from_dict(
            {"strict_base64": False, "max_input_length": 10, "unknown_key": "ignored"}
        )
        assert config == CodecConfig(strict_base64=False, max_input_length=10)


class TestContextVarBehavior:
    """Test get/set/reset and the context manager."""

    def test_default_config(self) -> None:
        reset_codec_config()
        assert get_codec_config() == CodecConfig()

    def test_set_and_reset(self) -> None:
        set_codec_config(CodecConfig(strict_base64=False))
        try:
            assert get_codec_config().strict_base64 is False
        finally:
            reset_codec_config()
        assert get_codec_config().strict_base64 is True

    def test_context_manager_restores(self) -> None:
        outer = CodecConfig(default_charset="utf-8")
        with codec_config_context(outer):
            with codec_config_context(CodecConfig(strict_base64=False)):
                assert get_codec_config().strict_base64 is False
            assert get_codec_config() is outer
        assert get_codec_config() == CodecConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(DecodeError), codec_config_context(CodecConfig(max_input_length=1)):
            decode("data:,x")
        assert get_codec_config().max_input_length is None

    def test_thread_isolation(self) -> None:
        """A config set in one thread is invisible to another."""
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_codec_config().strict_base64)

        with codec_config_context(CodecConfig(strict_base64=False)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()
        assert seen == [True]


class TestOptionsAffectDecoding:
    """Each option changes decode() as documented."""

    def test_default_charset(self) -> None:
        with codec_config_context(CodecConfig(default_charset="utf-8")):
            assert decode("data:,x").params == {"charset": "utf-8"}

    def test_default_charset_dropped_with_explicit_type(self) -> None:
        with codec_config_context(CodecConfig(default_charset="utf-8")):
            assert decode("data:text/html,x").params == {}

    def test_strict_base64_rejects_whitespace(self) -> None:
        with pytest.raises(Base64Error):
            decode("data:;base64,aGV5\nYQ==")

    def test_lenient_base64(self) -> None:
        with codec_config_context(CodecConfig(strict_base64=False)):
            assert decode("data:;base64,aGV5\nYQ==").data == b"heya"

    def test_max_input_length(self) -> None:
        with codec_config_context(CodecConfig(max_input_length=8)):
            assert decode("data:,ab").data == b"ab"
            with pytest.raises(DecodeError, match="exceeds limit 8"):
                decode("data:,abcd")

    def test_codec_carries_config(self) -> None:
        codec = DataURICodec(CodecConfig(default_charset="utf-8"))
        assert codec("data:,x").params == {"charset": "utf-8"}
        assert decode("data:,x").params == {"charset": "US-ASCII"}
