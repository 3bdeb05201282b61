"""Logging for docsmith.

Stage modules log through ``logging.getLogger(__name__)``; everything under
the ``docsmith`` logger is rendered by a single Rich handler with console
markup, so messages such as ``[green]Website generated[/green]`` show in
colour.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["HANDLER_NAME", "LOG_LEVEL_ENV", "configure_logging", "console", "resolve_level"]

LOG_LEVEL_ENV: Final[str] = "DOCSMITH_LOG_LEVEL"
HANDLER_NAME: Final[str] = "docsmith-rich"
PACKAGE_LOGGER: Final[str] = "docsmith"

console = Console()


def resolve_level(level: int | None = None) -> int:
    """Return ``level`` if given, else the level named by ``DOCSMITH_LOG_LEVEL``.

    An unset or unknown level name falls back to INFO.
    """
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    resolved = logging.getLevelName(name) if name else logging.INFO
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach the Rich handler to the ``docsmith`` logger and set its level.

    Safe to call repeatedly: the handler is added once and later calls only
    change the level.

    Args:
        level: Explicit level (from ``--verbose``/``--quiet``); overrides the environment

    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(handler.get_name() == HANDLER_NAME for handler in package_logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=True, rich_tracebacks=True)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)

    package_logger.setLevel(resolve_level(level))
    return package_logger
