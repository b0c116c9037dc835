"""Custom exception hierarchy for dept-roster.

All exceptions that cross layer boundaries must inherit from
:class:`RosterError`.  The session loop recovers from
:class:`InvalidCommandError`; everything else is fatal and is rendered
by the CLI error boundary.

Hierarchy
---------
RosterError
├── InvalidCommandError
├── InputStreamError
└── EnvironmentError
"""

from __future__ import annotations


class RosterError(Exception):
    """Base exception for all dept-roster errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command parsing -------------------------------------------------------

class InvalidCommandError(RosterError):
    """Raised when a command line does not match any known command form."""

    def __init__(self, line: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid command: {line.strip()!r}", hint=hint)
        self.line: str = line
        """The raw line that was rejected."""


# --- Input stream ----------------------------------------------------------

class InputStreamError(RosterError):
    """Raised when the command input stream cannot be read."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RosterError):
    """Raised when a required runtime dependency is not available."""
