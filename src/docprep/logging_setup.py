"""Rich-backed logging for the docprep CLI."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

LOG_LEVEL_ENV = "DOCPREP_LOG_LEVEL"

console = Console()

_handler: RichHandler | None = None


def resolve_level() -> int:
    """Return the level named by ``DOCPREP_LOG_LEVEL``, defaulting to INFO."""
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Attach the console handler to the root logger (once) and apply the level."""
    global _handler  # noqa: PLW0603

    root_logger = logging.getLogger()
    if _handler is None:
        # Filenames and paths may contain brackets, so Rich markup stays off.
        _handler = RichHandler(console=console, rich_tracebacks=True, show_path=False, markup=False)
        _handler.setFormatter(logging.Formatter("%(message)s"))
    if _handler not in root_logger.handlers:
        root_logger.addHandler(_handler)
    root_logger.setLevel(resolve_level())
