"""Shared pytest fixtures and configuration for the dept-roster test suite.

Guidelines
----------
* Core tests must be pure: no stdin/stdout.
* CLI tests feed input through a line reader, never a real terminal.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional

import pytest

from dept_roster.core.roster import Roster


@pytest.fixture
def roster() -> Roster:
    """A fresh, empty roster."""
    return Roster()


@pytest.fixture
def lines_reader() -> Callable[[Iterable[str]], Callable[[], Optional[str]]]:
    """Build a line reader that yields *lines* then signals end of input.

    The returned reader records how many lines were consumed on its
    ``consumed`` attribute.
    """

    def _make(lines: Iterable[str]) -> Callable[[], Optional[str]]:
        pending = list(lines)

        def _read() -> Optional[str]:
            if not pending:
                return None
            _read.consumed += 1  # type: ignore[attr-defined]
            return pending.pop(0)

        _read.consumed = 0  # type: ignore[attr-defined]
        return _read

    return _make
