"""Logging configuration for the CLI.

Logs go to stderr through Rich so they don't interleave with the screen or
with JSON written to stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    """Install a single RichHandler on the root logger."""

    resolved = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(resolved, logging.WARNING))
