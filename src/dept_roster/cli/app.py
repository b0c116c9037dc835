"""CLI application entry point for dept-roster.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dept_roster.exceptions.RosterError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; parsing and execution are delegated to
  the core layer, the loop to :mod:`dept_roster.cli.session`.
* The roster is created here and handed to the session explicitly.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from dept_roster.cli import exit_codes
from dept_roster.cli.console import console
from dept_roster.cli.session import LineReader, run_session
from dept_roster.core.roster import Roster
from dept_roster.exceptions import RosterError
from dept_roster.utils.log import configure_logging
from dept_roster.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI takes no positional arguments; commands are read
    interactively from standard input.
    """
    parser = argparse.ArgumentParser(
        prog="dept-roster",
        description=(
            "Interactive department roster. Commands: "
            "'Add <name> to <department>', 'List <department>', 'All', 'Exit'."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug diagnostics to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    read_line: LineReader | None = None,
) -> int:
    """Run the dept-roster CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    read_line:
        Optional source of input lines, forwarded to the session.
        Standard input is used when ``None``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    roster = Roster()
    return run_session(roster, read_line)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RosterError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
