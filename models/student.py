# models/student.py

"""
Represents a student on the roster.

A student is identified by a numeric ID and a display name, and owns a `GradeSet` of
per-subject grades. Students come in two variants, distinguished by `StudentType`:
- Regular students, with no additional data
- Graduate students, who also carry a thesis title

The variant is fixed at creation and drives the type tag and extra field written to the
roster file, as well as the "(Graduate Student)" label and thesis line in `summary()`.
"""

from __future__ import annotations

import re
from enum import Enum

import core.formatters as formatters
from models.grade_set import GradeSet

FIELD_DELIMITER = "|"
FIELD_COUNT = 5
ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


class StudentType(str, Enum):
    REGULAR = "STU"
    GRADUATE = "GRD"


class Student:

    def __init__(
        self,
        id: int,
        name: str,
        student_type: StudentType = StudentType.REGULAR,
        thesis_title: str = "",
    ):
        self._id: int = id
        self._name: str = name
        self._student_type: StudentType = student_type
        self._thesis_title: str = (
            thesis_title if student_type is StudentType.GRADUATE else ""
        )
        self._grades: GradeSet = GradeSet()

    # === public classmethods ===

    @classmethod
    def make_regular(cls, name: str, id: int) -> Student:
        return cls(id=id, name=name, student_type=StudentType.REGULAR)

    @classmethod
    def make_graduate(cls, name: str, id: int, thesis_title: str) -> Student:
        return cls(
            id=id,
            name=name,
            student_type=StudentType.GRADUATE,
            thesis_title=thesis_title,
        )

    # === properties ===

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def student_type(self) -> StudentType:
        return self._student_type

    @property
    def is_graduate(self) -> bool:
        return self._student_type is StudentType.GRADUATE

    @property
    def thesis_title(self) -> str:
        return self._thesis_title

    @property
    def grades(self) -> GradeSet:
        return self._grades

    @property
    def has_grades(self) -> bool:
        return not self._grades.is_empty

    # --- persistence fields ---

    @property
    def type_tag(self) -> str:
        return self._student_type.value

    @property
    def extra_info(self) -> str:
        return self._thesis_title if self.is_graduate else ""

    # === persistence and import ===

    def to_line(self) -> str:
        return FIELD_DELIMITER.join(
            [
                self.type_tag,
                str(self._id),
                self._name,
                self.extra_info,
                self._grades.serialize(),
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> Student:
        """
        Builds a `Student` from one line of the roster file.

        Args:
            line (str): A line of the form `TYPE|id|name|extra|grades`, without the trailing newline.

        Returns:
            A new `Student` with its grades restored.

        Raises:
            ValueError:
                - If the line has fewer than five `|`-separated fields.
                - If the id field is not an integer.

        Notes:
            - A `GRD` tag yields a graduate student with `extra` as the thesis title.
            - Any other tag, recognized or not, yields a regular student.
            - Fields past the fifth are ignored.
        """
        parts = line.split(FIELD_DELIMITER)

        if len(parts) < FIELD_COUNT:
            raise ValueError(
                f"Expected {FIELD_COUNT} fields but found {len(parts)}: {line!r}"
            )

        tag, id_text, name, extra, fragment = parts[:FIELD_COUNT]

        if not ID_PATTERN.fullmatch(id_text):
            raise ValueError(f"Student id is not an integer: {id_text!r}")

        id = int(id_text)

        if tag == StudentType.GRADUATE.value:
            student = cls.make_graduate(name, id, extra)
        else:
            student = cls.make_regular(name, id)

        student._grades = GradeSet.deserialize(fragment)

        return student

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._student_type.name}, {self._thesis_title})"

    def __str__(self) -> str:
        return f"{self.type_tag}: {self._name} - (ID: {self._id})"

    # === data accessors ===

    def average(self) -> float:
        return self._grades.average()

    def summary(self) -> str:
        """
        Builds the multi-line description shown when listing students.

        Returns:
            A string of the form:

                ID: 2 | Name: Bo (Graduate Student) | Average: 85.00
                  Thesis: Soil Mechanics
                  Grades:
                    math : 80.00
                    sci : 90.00

        Notes:
            - The average reads "N/A" when the student has no grades, and the grades block is omitted.
            - The thesis line is only present for graduate students.
            - Grade lines are sorted by subject name and shown with two decimal places.
        """
        if self.is_graduate:
            label = " (Graduate Student)"
            extra_lines = [f"  Thesis: {self._thesis_title}"]
        else:
            label = ""
            extra_lines = []

        average = formatters.format_average(
            self.average() if self.has_grades else None
        )

        lines = [f"ID: {self._id} | Name: {self._name}{label} | Average: {average}"]
        lines.extend(extra_lines)

        if self.has_grades:
            lines.append("  Grades:")
            lines.extend(
                f"    {subject} : {formatters.format_grade_fixed(grade)}"
                for subject, grade in self._grades.items()
            )

        return "\n".join(lines)

    # === data manipulators ===

    def add_grade(self, subject: str, grade: float) -> None:
        self._grades.add_or_update(subject, grade)
