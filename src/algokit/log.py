"""
Logging setup.

Diagnostics go through the standard `logging` module and are rendered by
rich's RichHandler on the shared console, so log lines and the sweep's rich
tables interleave cleanly.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(level: str = "INFO", *, rich_console: Optional[Console] = None) -> None:
    """
    Configure the root logger once.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        rich_console: Console to render on (defaults to the shared one)
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=rich_console or console, rich_tracebacks=True)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)
