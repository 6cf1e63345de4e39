# tests/test_cli.py

import pytest

import cli.menu_helpers as helpers
from cli.menu_helpers import MenuSignal
from cli.menus import file_menu, reports_menu, students_menu
from models.roster import Roster


@pytest.fixture
def feed_input(monkeypatch):
    def feed(*responses: str) -> None:
        answers = iter(responses)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

    return feed


# === menu helpers ===


def test_display_menu_retries_until_valid(feed_input, capsys):
    options = [("First", lambda: 1), ("Second", lambda: 2)]
    feed_input("9", "-1", "abc", "2")

    action = helpers.display_menu("Menu", options)

    assert action() == 2
    assert capsys.readouterr().out.count("Unknown choice") == 3


def test_display_menu_exit(feed_input):
    feed_input("0")
    assert helpers.display_menu("Menu", []) is MenuSignal.EXIT


def test_prompt_float_input_retries(feed_input):
    feed_input("ninety", "", "87.5")
    assert helpers.prompt_float_input("Grade:") == 87.5


def test_confirm_action(feed_input):
    feed_input("maybe", "YES")
    assert helpers.confirm_action("Continue?")


# === student actions ===


def test_add_regular_student(feed_input, sample_roster, capsys):
    feed_input("3", "1", "Ann", "x", "1")

    students_menu.add_student(sample_roster)

    student = sample_roster.find_student_by_id(1).data["record"]
    assert student.name == "Ann"
    assert not student.is_graduate
    assert "Regular student added." in capsys.readouterr().out


def test_add_graduate_student(feed_input, sample_roster):
    feed_input("2", "Bo", "2", "Soil | Rock", "Soil Mechanics")

    students_menu.add_student(sample_roster)

    student = sample_roster.find_student_by_id(2).data["record"]
    assert student.thesis_title == "Soil Mechanics"


def test_add_student_with_taken_id(feed_input, populated_roster, capsys):
    feed_input("1", "Someone", "1")

    students_menu.add_student(populated_roster)

    assert len(populated_roster) == 2
    assert "already exists. Cancelled." in capsys.readouterr().out


def test_add_or_update_grade(feed_input, populated_roster, sample_graduate):
    feed_input("2", "", "sci:1", "sci", "high", "91")

    students_menu.add_or_update_grade(populated_roster)

    assert sample_graduate.grades.get("sci") == 91.0


def test_remove_missing_student(feed_input, populated_roster, capsys):
    feed_input("7")

    students_menu.remove_student(populated_roster)

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_display_all_students(populated_roster, capsys):
    students_menu.display_all_students(populated_roster)

    out = capsys.readouterr().out
    assert "ID: 1 | Name: Ann | Average: 90.00" in out
    assert "    math : 90.00" in out
    assert "ID: 2 | Name: Bo (Graduate Student) | Average: N/A" in out


def test_display_no_students(capsys):
    students_menu.display_all_students(Roster())
    assert "No students to display." in capsys.readouterr().out


# === file and report actions ===


def test_save_and_load_from_menu(feed_input, populated_roster, tmp_path):
    path = str(tmp_path / "menu.txt")

    feed_input(path)
    file_menu.save_roster(populated_roster)

    roster = Roster()
    feed_input(path)
    file_menu.load_roster(roster)

    assert [s.id for s in roster] == [1, 2]


def test_load_with_unsaved_changes_can_be_declined(feed_input, populated_roster):
    feed_input("n")

    file_menu.load_roster(populated_roster)

    assert len(populated_roster) == 2


def test_show_pass_fail(feed_input, populated_roster, capsys):
    feed_input("50")

    reports_menu.show_pass_fail(populated_roster)

    out = capsys.readouterr().out
    assert "Pass/Fail report (cutoff = 50)" in out
    assert "ID: 1 | Name: Ann | Average: 90.00 | PASS" in out
    assert "ID: 2 | Name: Bo | Average: 0.00 | FAIL" in out
