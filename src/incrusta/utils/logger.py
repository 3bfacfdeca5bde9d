"""Logger lookup for Incrusta modules.

Every module logs under the ``incrusta`` namespace. The package root logger
carries a NullHandler, so nothing is printed (and no "no handlers" warning
appears) until the application configures logging itself:

    >>> import logging
    >>> logging.getLogger("incrusta").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "incrusta"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, namespaced under ``incrusta.``.

    Example:
        >>> get_logger("incrusta.lexer.core").name
        'incrusta.lexer.core'
        >>> get_logger("plugins").name
        'incrusta.plugins'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
