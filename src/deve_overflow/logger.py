"""Logging setup for deve-overflow.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached by :func:`setup_logging`, which the CLI invokes once.  Output
goes to stderr through Rich when it is installed.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "deve_overflow"

_HANDLER_MARKER = "_deve_overflow_handler"


def _build_handler() -> logging.Handler:
    """Return a Rich handler, or a plain stderr handler without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure and return the package logger.

    Calling it again only updates the level; the handler is attached
    once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    if not any(getattr(h, _HANDLER_MARKER, False) for h in logger.handlers):
        handler = _build_handler()
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)

    return logger
