"""Tests for the in-memory roster (core/roster.py).

Coverage:
* Add creates departments lazily and keeps duplicates.
* List sorts a fresh copy and never reorders stored members.
* All reports every department, or that there are none.
* Exit is the only terminating command.
* ``execute`` dispatches every command variant.
"""

from __future__ import annotations

import pytest

from dept_roster.core.models import (
    AddCommand,
    AllCommand,
    ExitCommand,
    ListCommand,
    Outcome,
)
from dept_roster.core.roster import Roster


def _populate(roster: Roster, *pairs: tuple[str, str]) -> None:
    for name, department in pairs:
        roster.add(name, department)


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_creates_department(self, roster: Roster) -> None:
        assert "Engineering" not in roster
        result = roster.add("Sally", "Engineering")
        assert "Engineering" in roster
        assert result.outcome is Outcome.CONTINUE
        assert result.lines == ()

    def test_duplicates_preserved(self, roster: Roster) -> None:
        _populate(roster, ("Sally", "Sales"), ("Sally", "Sales"))
        assert roster.members("Sales") == ["Sally", "Sally"]

    def test_same_name_in_several_departments(self, roster: Roster) -> None:
        _populate(roster, ("Sally", "Sales"), ("Sally", "Engineering"))
        assert roster.members("Sales") == ["Sally"]
        assert roster.members("Engineering") == ["Sally"]
        assert len(roster) == 2


# ---------------------------------------------------------------------------
# members / list_department
# ---------------------------------------------------------------------------

class TestListDepartment:
    def test_sorted_members(self, roster: Roster) -> None:
        _populate(roster, ("Sally", "Engineering"), ("Ben", "Engineering"))
        result = roster.list_department("Engineering")
        assert result.outcome is Outcome.CONTINUE
        assert result.lines == ('People in Engineering: ["Ben", "Sally"]',)

    def test_unknown_department_is_empty(self, roster: Roster) -> None:
        result = roster.list_department("Marketing")
        assert result.lines == ("Department Marketing is empty.",)
        assert "Marketing" not in roster

    def test_sort_is_lexicographic(self, roster: Roster) -> None:
        _populate(roster, ("bob", "Ops"), ("Zed", "Ops"), ("Amy", "Ops"))
        assert roster.members("Ops") == ["Amy", "Zed", "bob"]

    def test_stored_order_untouched(self, roster: Roster) -> None:
        _populate(roster, ("Sally", "Engineering"), ("Ben", "Engineering"))
        roster.list_department("Engineering")
        roster.add("Amir", "Engineering")
        assert roster._departments["Engineering"] == ["Sally", "Ben", "Amir"]

    def test_members_returns_copy(self, roster: Roster) -> None:
        roster.add("Sally", "Engineering")
        members = roster.members("Engineering")
        assert members is not None
        members.append("Mallory")
        assert roster.members("Engineering") == ["Sally"]

    def test_idempotent(self, roster: Roster) -> None:
        _populate(roster, ("Sally", "Engineering"), ("Ben", "Engineering"))
        first = roster.list_department("Engineering")
        second = roster.list_department("Engineering")
        assert first == second


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------

class TestListAll:
    def test_empty_roster(self, roster: Roster) -> None:
        result = roster.list_all()
        assert result.outcome is Outcome.CONTINUE
        assert result.lines == ("No Departments found.",)

    def test_every_department_reported(self, roster: Roster) -> None:
        _populate(
            roster,
            ("Sally", "Engineering"),
            ("Amir", "Sales"),
            ("Ben", "Engineering"),
        )
        result = roster.list_all()
        assert sorted(result.lines) == [
            'People in Engineering: ["Ben", "Sally"]',
            'People in Sales: ["Amir"]',
        ]

    def test_departments_listed(self, roster: Roster) -> None:
        _populate(roster, ("Sally", "Engineering"), ("Amir", "Sales"))
        assert set(roster.departments()) == {"Engineering", "Sales"}


# ---------------------------------------------------------------------------
# exit / execute
# ---------------------------------------------------------------------------

class TestExecute:
    def test_exit_terminates(self, roster: Roster) -> None:
        result = roster.execute(ExitCommand())
        assert result.terminates
        assert result.lines == ("Exiting!",)

    def test_exit_terminates_with_state(self, roster: Roster) -> None:
        roster.add("Sally", "Engineering")
        assert roster.exit().outcome is Outcome.TERMINATE

    def test_scenario(self, roster: Roster) -> None:
        roster.execute(AddCommand(name="Sally", department="Engineering"))
        roster.execute(AddCommand(name="Amir", department="Sales"))
        roster.execute(AddCommand(name="Ben", department="Engineering"))

        assert roster.execute(ListCommand(department="Engineering")).lines == (
            'People in Engineering: ["Ben", "Sally"]',
        )
        assert roster.execute(ListCommand(department="Sales")).lines == (
            'People in Sales: ["Amir"]',
        )
        assert roster.execute(ListCommand(department="Marketing")).lines == (
            "Department Marketing is empty.",
        )

    def test_all_via_execute(self, roster: Roster) -> None:
        result = roster.execute(AllCommand())
        assert result.lines == ("No Departments found.",)
        assert not result.terminates

    def test_unknown_command_type(self, roster: Roster) -> None:
        with pytest.raises(TypeError):
            roster.execute("All")  # type: ignore[arg-type]
