# tests/test_student.py

import pytest

from models.student import Student, StudentType


def test_make_regular():
    student = Student.make_regular("Ann", 1)

    assert student.id == 1
    assert student.name == "Ann"
    assert student.student_type is StudentType.REGULAR
    assert not student.is_graduate
    assert student.type_tag == "STU"
    assert student.extra_info == ""
    assert not student.has_grades


def test_make_graduate(sample_graduate):
    assert sample_graduate.student_type is StudentType.GRADUATE
    assert sample_graduate.is_graduate
    assert sample_graduate.thesis_title == "X"
    assert sample_graduate.type_tag == "GRD"
    assert sample_graduate.extra_info == "X"


def test_regular_student_has_no_thesis():
    student = Student(3, "Cy", StudentType.REGULAR, "ignored")
    assert student.thesis_title == ""
    assert student.extra_info == ""


def test_add_grade_and_average(sample_student):
    sample_student.add_grade("sci", 80)

    assert sample_student.has_grades
    assert sample_student.average() == 85.0


def test_average_without_grades(sample_graduate):
    assert sample_graduate.average() == 0.0


def test_regular_summary_without_grades():
    student = Student.make_regular("Ann", 1)
    assert student.summary() == "ID: 1 | Name: Ann | Average: N/A"


def test_regular_summary_with_grades(sample_student):
    sample_student.add_grade("art", 76.5)

    assert sample_student.summary() == (
        "ID: 1 | Name: Ann | Average: 83.25\n"
        "  Grades:\n"
        "    art : 76.50\n"
        "    math : 90.00"
    )


def test_graduate_summary(sample_graduate):
    assert sample_graduate.summary() == (
        "ID: 2 | Name: Bo (Graduate Student) | Average: N/A\n"
        "  Thesis: X"
    )

    sample_graduate.add_grade("sci", 90)
    sample_graduate.add_grade("math", 80)

    assert sample_graduate.summary() == (
        "ID: 2 | Name: Bo (Graduate Student) | Average: 85.00\n"
        "  Thesis: X\n"
        "  Grades:\n"
        "    math : 80.00\n"
        "    sci : 90.00"
    )


def test_student_to_line(sample_student, sample_graduate):
    assert sample_student.to_line() == "STU|1|Ann||math:90"
    assert sample_graduate.to_line() == "GRD|2|Bo|X|"


def test_student_from_line():
    student = Student.from_line("GRD|7|Dee|Graph Theory|math:88,sci:91.5")

    assert student.id == 7
    assert student.name == "Dee"
    assert student.is_graduate
    assert student.thesis_title == "Graph Theory"
    assert student.grades.to_dict() == {"math": 88.0, "sci": 91.5}


def test_unknown_tag_loads_as_regular():
    student = Student.from_line("XYZ|3|Cy|ignored|math:50")

    assert student.student_type is StudentType.REGULAR
    assert student.extra_info == ""
    assert student.grades.get("math") == 50.0


def test_from_line_ignores_extra_fields():
    student = Student.from_line("STU|4|Eve||math:60|trailing")

    assert student.id == 4
    assert student.grades.to_dict() == {"math": 60.0}


def test_from_line_rejects_short_line():
    with pytest.raises(ValueError):
        Student.from_line("GRD|2|Bo")


def test_from_line_rejects_non_integer_id():
    with pytest.raises(ValueError):
        Student.from_line("STU|abc|Ann||")


def test_from_line_rejects_loose_integer_forms():
    for id_text in ["1_0", "\u0661\u0662", "1.0", ""]:
        with pytest.raises(ValueError):
            Student.from_line(f"STU|{id_text}|Ann||")


def test_from_line_accepts_signed_and_padded_ids():
    assert Student.from_line("STU| 12 |Ann||").id == 12
    assert Student.from_line("STU|-3|Ann||").id == -3


def test_student_to_str(sample_graduate):
    assert str(sample_graduate) == "GRD: Bo - (ID: 2)"
