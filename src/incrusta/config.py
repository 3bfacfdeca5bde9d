"""ContextVar-based codec configuration for Incrusta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per DataURICodec call, read by the parser and the
convenience layer in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Through the high-level class
    codec = DataURICodec(CodecConfig(strict_base64=False))
    uri = codec.decode("data:;base64,aGV5\\nYQ==")

    # Direct parser usage (advanced)
    from incrusta.config import set_codec_config, reset_codec_config, CodecConfig

    set_codec_config(CodecConfig(max_input_length=4096))
    try:
        uri = Parser(source).parse()
    finally:
        reset_codec_config()

    # Or use the context manager
    with codec_config_context(CodecConfig(default_charset="utf-8")):
        uri = decode("data:,hello")

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from incrusta.nodes import DEFAULT_CHARSET


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        default_charset: charset parameter implied when no media type is given
        strict_base64: Reject base64 payloads with characters outside the
            alphabet. When False, whitespace and other stray characters are
            discarded before decoding.
        max_input_length: Refuse to decode input longer than this many characters
        sniffer: Content-type detector used by auto_encode (defaults to
            incrusta.sniff.detect_content_type)

    """

    default_charset: str = DEFAULT_CHARSET
    strict_base64: bool = True
    max_input_length: int | None = None
    sniffer: Callable[[bytes], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CodecConfig":
        """Create CodecConfig from dictionary.

        Only includes keys that are valid CodecConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                CodecConfig attribute names.

        Returns:
            New CodecConfig instance with values from dict.

        Example:
            >>> config = CodecConfig.from_dict({
            ...     "strict_base64": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_base64
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CodecConfig = CodecConfig()

_codec_config: ContextVar[CodecConfig] = ContextVar(
    "codec_config",
    default=_DEFAULT_CONFIG,
)


def get_codec_config() -> CodecConfig:
    """Get current codec configuration (thread-local)."""
    return _codec_config.get()


def set_codec_config(config: CodecConfig) -> None:
    """Set codec configuration for current context.

    Args:
        config: CodecConfig instance to use for this context.

    """
    _codec_config.set(config)


def reset_codec_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _codec_config.set(_DEFAULT_CONFIG)


@contextmanager
def codec_config_context(config: CodecConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: CodecConfig to use within the context.

    Yields:
        None

    Example:
        >>> with codec_config_context(CodecConfig(strict_base64=False)):
        ...     uri = decode("data:;base64,aGV5\\nYQ==")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _codec_config.get()
    _codec_config.set(config)
    try:
        yield
    finally:
        _codec_config.set(previous)


__all__ = [
    "CodecConfig",
    "get_codec_config",
    "set_codec_config",
    "reset_codec_config",
    "codec_config_context",
]
