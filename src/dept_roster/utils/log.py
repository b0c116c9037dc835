"""Diagnostic logging for dept-roster.

Every module obtains its logger through :func:`get_logger`; the CLI
calls :func:`configure_logging` once at start-up.  Records always go to
stderr so the command output on stdout stays untouched.  Rich renders
them when it is installed, a plain stream handler otherwise.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME: str = "dept_roster"

_HANDLER_MARKER: str = "_dept_roster_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for *name* (the package root logger by default)."""
    return logging.getLogger(name or ROOT_LOGGER_NAME)


def _build_handler() -> logging.Handler:
    """Create a Rich handler on stderr, or a plain one without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s [%(name)s]: %(message)s"),
        )
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach the stderr handler to the package logger and set its level.

    Safe to call more than once: the handler is only attached the first
    time, later calls just update the level.
    """
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(getattr(h, _HANDLER_MARKER, False) for h in logger.handlers):
        handler = _build_handler()
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)
        logger.propagate = False
    return logger
