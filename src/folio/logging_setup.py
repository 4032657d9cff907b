"""Rich console logging for Folio builds."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["FolioLogHandler", "configure_logging", "console"]

LOG_LEVEL_ENV: Final[str] = "FOLIO_LOG_LEVEL"
DEFAULT_LEVEL: Final[int] = logging.INFO

console = Console()


class FolioLogHandler(RichHandler):
    """The handler owned by :func:`configure_logging`; other root handlers are left alone."""


def resolve_level(level_name: str | None = None) -> int:
    """Level from ``level_name``, else ``FOLIO_LOG_LEVEL``; unknown names mean INFO."""
    name = (level_name or os.getenv(LOG_LEVEL_ENV) or "").upper()
    return logging.getLevelNamesMapping().get(name, DEFAULT_LEVEL)


def configure_logging(level_name: str | None = None) -> None:
    """Attach one :class:`FolioLogHandler` to the root logger and set its level.

    Repeated calls only change the level.
    """
    root_logger = logging.getLogger()

    if not any(isinstance(handler, FolioLogHandler) for handler in root_logger.handlers):
        handler = FolioLogHandler(console=console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    root_logger.setLevel(resolve_level(level_name))
    logging.captureWarnings(True)
