"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def init_logging(level: str | int = logging.WARNING) -> None:
    """Route log records to stderr through a single Rich handler.

    Existing root handlers are removed so repeated calls do not duplicate
    output. *level* is a logging constant or one of ``debug``, ``info``,
    ``warning``, ``error``, ``critical``.
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.lower(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
