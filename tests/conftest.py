# tests/conftest.py

import pytest

from models.roster import Roster
from models.student import Student


@pytest.fixture
def sample_student():
    student = Student.make_regular("Ann", 1)
    student.add_grade("math", 90)
    return student


@pytest.fixture
def sample_graduate():
    return Student.make_graduate("Bo", 2, "X")


@pytest.fixture
def sample_roster(tmp_path):
    return Roster(str(tmp_path / "students_db.txt"))


@pytest.fixture
def populated_roster(sample_roster, sample_student, sample_graduate):
    sample_roster.add_student(sample_student)
    sample_roster.add_student(sample_graduate)
    return sample_roster


@pytest.fixture
def write_roster_file(tmp_path):
    def write(contents: str, filename: str = "roster.txt") -> str:
        path = tmp_path / filename
        path.write_text(contents, encoding="utf-8")
        return str(path)

    return write
