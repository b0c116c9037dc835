"""Domain models for dept-roster.

Commands are **frozen** dataclasses: immutable value objects forming a
closed tagged union.  The parser constructs them once and the roster
consumes them exhaustively.  They carry zero I/O and no dependencies on
external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Command variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AddCommand:
    """Add one person to a department, creating the department if needed."""

    name: str
    """Person to record."""

    department: str
    """Target department."""


@dataclass(frozen=True, slots=True)
class ListCommand:
    """Report the members of a single department."""

    department: str


@dataclass(frozen=True, slots=True)
class AllCommand:
    """Report every department currently in the roster."""


@dataclass(frozen=True, slots=True)
class ExitCommand:
    """Stop the session."""


Command = Union[AddCommand, ListCommand, AllCommand, ExitCommand]
"""Any structured command produced by the parser."""


# ---------------------------------------------------------------------------
# Execution result
# ---------------------------------------------------------------------------

class Outcome(enum.Enum):
    """Whether the session loop keeps reading after a command."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of executing one command, plus the lines to display."""

    outcome: Outcome
    lines: tuple[str, ...] = ()

    @property
    def terminates(self) -> bool:
        return self.outcome is Outcome.TERMINATE
