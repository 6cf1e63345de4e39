# tests/test_grade_set.py

from models.grade_set import GradeSet


def test_empty_average():
    assert GradeSet().average() == 0.0


def test_average():
    grades = GradeSet({"math": 80, "sci": 90})
    assert grades.average() == 85.0


def test_add_or_update_overwrites():
    grades = GradeSet()
    grades.add_or_update("math", 70)
    grades.add_or_update("math", 95.5)

    assert len(grades) == 1
    assert grades.get("math") == 95.5


def test_serialize_sorts_by_subject():
    grades = GradeSet({"sci": 90, "art": 72.5, "math": 80})
    assert grades.serialize() == "art:72.5,math:80,sci:90"


def test_serialize_empty():
    assert GradeSet().serialize() == ""


def test_deserialize():
    grades = GradeSet.deserialize("math:90,sci:85.5")

    assert grades.to_dict() == {"math": 90.0, "sci": 85.5}


def test_deserialize_empty_fragment():
    grades = GradeSet.deserialize("")
    assert grades.is_empty


def test_deserialize_trims_whitespace():
    grades = GradeSet.deserialize(" art : 70 ,math:90\r")

    assert grades.to_dict() == {"art": 70.0, "math": 90.0}


def test_deserialize_skips_malformed_pairs():
    grades = GradeSet.deserialize("math:90,history,sci:abc,x:1:2,:55,pe:")

    assert grades.to_dict() == {"math": 90.0}


def test_deserialize_reverses_serialize():
    original = GradeSet({"math": 0.1 + 0.2, "sci": -4, "art": 1e-7})

    assert GradeSet.deserialize(original.serialize()) == original


def test_items_and_subjects_are_sorted():
    grades = GradeSet({"sci": 1, "art": 2})

    assert grades.subjects == ["art", "sci"]
    assert grades.items() == [("art", 2.0), ("sci", 1.0)]
    assert "art" in grades
    assert "math" not in grades
