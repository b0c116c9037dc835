"""Pure report formatting.

Every function in this module is a **pure** transformation from roster
data to display text, with no I/O and fully deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence

NO_DEPARTMENTS: str = "No Departments found."
EXITING: str = "Exiting!"


_ESCAPES: dict[str, str] = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape_char(char: str) -> str:
    """Escape one character; non-printables become ``\\u{hex}``."""
    if char in _ESCAPES:
        return _ESCAPES[char]
    if not char.isprintable():
        return f"\\u{{{ord(char):x}}}"
    return char


def _quote(name: str) -> str:
    """Render *name* double-quoted with control characters escaped."""
    return '"' + "".join(_escape_char(char) for char in name) + '"'


def format_people(people: Sequence[str]) -> str:
    """Render a list of names as ``["Ben", "Sally"]``."""
    return "[" + ", ".join(_quote(person) for person in people) + "]"


def format_department(department: str, people: Sequence[str] | None) -> str:
    """Build the one-line report for a department.

    *people* is the already-sorted member list, or ``None`` when the
    department is unknown.
    """
    if people is None:
        return f"Department {department} is empty."
    return f"People in {department}: {format_people(people)}"
