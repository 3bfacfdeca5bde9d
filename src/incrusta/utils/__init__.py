"""Utility modules for Incrusta.

Provides:
- logger: get_logger for logging
"""

from incrusta.utils.logger import get_logger

__all__ = [
    "get_logger",
]
