"""Logging configuration for the command-line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = 'WARNING') -> None:
    """Send log records to stderr through rich.

    Args:
        level: Log level name, e.g. 'DEBUG' or 'WARNING'
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
