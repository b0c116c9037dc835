"""Core layer — command parsing, the roster, and report formatting.

Rules
-----
* No ``print()`` calls.
* No stdin/stdout access.
* No imports from ``cli``.
"""

from dept_roster.core.command_parser import parse_command
from dept_roster.core.models import (
    AddCommand,
    AllCommand,
    Command,
    CommandResult,
    ExitCommand,
    ListCommand,
    Outcome,
)
from dept_roster.core.roster import Roster

__all__: list[str] = [
    "AddCommand",
    "AllCommand",
    "Command",
    "CommandResult",
    "ExitCommand",
    "ListCommand",
    "Outcome",
    "Roster",
    "parse_command",
]
