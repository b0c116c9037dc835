"""The in-memory department roster.

:class:`Roster` owns the department → people mapping and executes
structured commands against it.  It never prints: every execution
returns a :class:`~dept_roster.core.models.CommandResult` whose lines
the CLI layer renders.

Guarantees
----------
* A department only exists once its first member has been added.
* Stored member sequences keep insertion order; reports sort a copy.
* Every command succeeds; there are no recoverable errors here.
"""

from __future__ import annotations

from dept_roster.core.models import (
    AddCommand,
    AllCommand,
    Command,
    CommandResult,
    ExitCommand,
    ListCommand,
    Outcome,
)
from dept_roster.core.report import EXITING, NO_DEPARTMENTS, format_department
from dept_roster.utils.log import get_logger

logger = get_logger(__name__)


class Roster:
    """Mapping from department name to the people recorded in it."""

    def __init__(self) -> None:
        self._departments: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return len(self._departments)

    def __contains__(self, department: object) -> bool:
        return department in self._departments

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def departments(self) -> list[str]:
        """Return department names in first-insertion order."""
        return list(self._departments)

    def members(self, department: str) -> list[str] | None:
        """Return a freshly sorted copy of *department*'s members.

        Returns ``None`` when the department has never been added to.
        """
        people = self._departments.get(department)
        if people is None:
            return None
        return sorted(people)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, name: str, department: str) -> CommandResult:
        """Append *name* to *department*.  Duplicates are kept."""
        self._departments.setdefault(department, []).append(name)
        logger.debug("Added %r to %r", name, department)
        return CommandResult(Outcome.CONTINUE)

    def list_department(self, department: str) -> CommandResult:
        """Report the sorted members of *department*."""
        line = format_department(department, self.members(department))
        return CommandResult(Outcome.CONTINUE, (line,))

    def list_all(self) -> CommandResult:
        """Report every department, or that there are none."""
        if not self._departments:
            return CommandResult(Outcome.CONTINUE, (NO_DEPARTMENTS,))
        lines = tuple(
            format_department(department, self.members(department))
            for department in self.departments()
        )
        return CommandResult(Outcome.CONTINUE, lines)

    def exit(self) -> CommandResult:
        """Signal the session to stop."""
        return CommandResult(Outcome.TERMINATE, (EXITING,))

    def execute(self, command: Command) -> CommandResult:
        """Dispatch *command* to the matching operation."""
        logger.debug("Executing %r", command)
        if isinstance(command, AddCommand):
            return self.add(command.name, command.department)
        if isinstance(command, ListCommand):
            return self.list_department(command.department)
        if isinstance(command, AllCommand):
            return self.list_all()
        if isinstance(command, ExitCommand):
            return self.exit()
        raise TypeError(f"Unsupported command: {command!r}")
