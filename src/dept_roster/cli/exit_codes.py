"""Process exit statuses returned by :func:`dept_roster.cli.app.cli`.

A roster session has only two normal endings, ``Exit`` and end of
input, and both report :data:`SUCCESS`.  The other values are produced
by the error boundary alone.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Session ended through ``Exit`` or because standard input closed."""

GENERAL_ERROR: int = 1
"""A :class:`~dept_roster.exceptions.RosterError` stopped the session,
e.g. standard input could not be read."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C while waiting for a command (128 + SIGINT)."""
