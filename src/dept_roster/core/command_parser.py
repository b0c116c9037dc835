"""Pure command-line parsing.

Turns one line of free-form text into one of the four command variants
defined in :mod:`dept_roster.core.models`, or rejects it.  Matching is
positional and case-sensitive:

* ``Add <name> to <department>``
* ``List <department>``
* ``All``
* ``Exit``

Anything else raises :class:`~dept_roster.exceptions.InvalidCommandError`.
There is no partial or best-effort parse.
"""

from __future__ import annotations

import re

from dept_roster.core.models import (
    AddCommand,
    AllCommand,
    Command,
    ExitCommand,
    ListCommand,
)
from dept_roster.exceptions import InvalidCommandError
from dept_roster.utils.log import get_logger

logger = get_logger(__name__)

USAGE_HINT: str = (
    "Use one of: 'Add <name> to <department>', 'List <department>', "
    "'All', 'Exit'."
)

# U+001C..U+001F are whitespace to str.split() but not Unicode White_Space.
_WHITESPACE_RUN = re.compile(r"[^\S\x1c-\x1f]+")


def tokenize(line: str) -> list[str]:
    """Split *line* on runs of whitespace, discarding empty tokens."""
    return [token for token in _WHITESPACE_RUN.split(line) if token]


def parse_command(line: str) -> Command:
    """Parse a single input line into a structured command.

    Raises
    ------
    InvalidCommandError
        If the token sequence matches none of the command forms
        (wrong token count, wrong keyword, or wrong case).
    """
    tokens = tokenize(line)

    if len(tokens) == 4 and tokens[0] == "Add" and tokens[2] == "to":
        return AddCommand(name=tokens[1], department=tokens[3])
    if len(tokens) == 2 and tokens[0] == "List":
        return ListCommand(department=tokens[1])
    if tokens == ["All"]:
        return AllCommand()
    if tokens == ["Exit"]:
        return ExitCommand()

    logger.debug("Rejected command line: %r", line)
    raise InvalidCommandError(line, hint=USAGE_HINT)
