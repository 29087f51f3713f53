"""
Logging configuration for bake_helper.

All package loggers live under the ``bake_helper`` namespace so callers
can tune them with a single ``logging`` call.
"""

import logging
from typing import Optional

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "bake_helper"

_configured = False


def setup_logging(level: int = logging.WARNING, show_path: bool = False) -> logging.Logger:
    """
    Install a rich console handler on the package root logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Logging level for the package root logger
        show_path: Whether rich should print the source location

    Returns:
        The package root logger
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not _configured:
        handler = RichHandler(show_path=show_path, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        root.addHandler(handler)
        _configured = True

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger nested under the package root logger."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
