"""Logging setup for the catalogfetch CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "catalogfetch"


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a rich handler to the package logger.

    quiet shows warnings and errors only, verbose adds debug output.
    Calling this again replaces the previously installed handler.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
