"""The interactive command loop.

Reads one line at a time, parses it, executes it against the roster the
caller owns, and writes the resulting report lines to stdout.  Invalid
lines are reported and the loop re-prompts; the loop ends on ``Exit``
or at end of input.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Optional

from dept_roster.cli import exit_codes
from dept_roster.cli.console import output
from dept_roster.core.command_parser import parse_command
from dept_roster.core.roster import Roster
from dept_roster.exceptions import InputStreamError, InvalidCommandError
from dept_roster.utils.log import get_logger

logger = get_logger(__name__)

PROMPT: str = "Please input your command:"
INVALID_COMMAND: str = "Invalid Command!"

LineReader = Callable[[], Optional[str]]
"""Returns the next input line, or ``None`` at end of input."""


def read_stdin_line() -> str | None:
    """Read one line from standard input.

    Raises
    ------
    InputStreamError
        If standard input cannot be read or decoded.
    """
    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputStreamError(
            f"Failed to read command input: {exc}",
        ) from exc
    if line == "":
        return None
    return line


def run_session(roster: Roster, read_line: LineReader | None = None) -> int:
    """Run the prompt → parse → execute loop until it terminates.

    Parameters
    ----------
    roster:
        The roster every command is executed against.  The caller owns
        it; this function only mutates it through commands.
    read_line:
        Source of input lines.  Defaults to :func:`read_stdin_line`.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` after ``Exit`` or at end of input.
    """
    reader = read_line or read_stdin_line

    while True:
        output.print(PROMPT)
        line = reader()
        if line is None:
            logger.debug("End of input reached")
            return exit_codes.SUCCESS

        try:
            command = parse_command(line)
        except InvalidCommandError:
            output.print(INVALID_COMMAND)
            continue

        result = roster.execute(command)
        for text in result.lines:
            output.print(text)
        if result.terminates:
            return exit_codes.SUCCESS
