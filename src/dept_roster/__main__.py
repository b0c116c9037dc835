"""Allow ``python -m dept_roster`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dept_roster`` behaves identically to the
``dept-roster`` console script.
"""

from __future__ import annotations

from dept_roster.cli.app import cli

if __name__ == "__main__":
    cli()
