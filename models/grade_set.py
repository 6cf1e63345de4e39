# models/grade_set.py

"""
Represents the per-subject grades held by a single student.

Grades are stored as a mapping of subject name to a floating-point grade. Each subject
holds at most one grade; recording a grade for an existing subject replaces it.

Includes functionality for:
- Averaging all recorded grades
- Serializing to and from the compact grade fragment used in the roster file

The grade fragment is a comma-separated list of `subject:grade` pairs, written in
ascending subject order so that saved files are deterministic, e.g. `math:90,sci:85.5`.
"""

from __future__ import annotations

import core.formatters as formatters

PAIR_DELIMITER = ","
SUBJECT_DELIMITER = ":"


class GradeSet:

    def __init__(self, grades: dict[str, float] | None = None):
        self._grades: dict[str, float] = {}

        for subject, grade in (grades or {}).items():
            self.add_or_update(subject, grade)

    # === properties ===

    @property
    def is_empty(self) -> bool:
        return not self._grades

    @property
    def subjects(self) -> list[str]:
        return sorted(self._grades)

    # === persistence and import ===

    def serialize(self) -> str:
        return PAIR_DELIMITER.join(
            f"{subject}{SUBJECT_DELIMITER}{formatters.format_grade(grade)}"
            for subject, grade in self.items()
        )

    @classmethod
    def deserialize(cls, fragment: str) -> GradeSet:
        """
        Builds a `GradeSet` from a grade fragment produced by `serialize()`.

        Args:
            fragment (str): Comma-separated `subject:grade` pairs. May be empty.

        Returns:
            A new `GradeSet` holding every well-formed pair.

        Notes:
            - Subject and grade text are trimmed before use.
            - Pairs that do not split into exactly two pieces are dropped.
            - Pairs whose grade is not a number, or whose subject is blank, are dropped.
            - Malformed pairs are never reported as errors.
        """
        grade_set = cls()

        if not fragment:
            return grade_set

        for item in fragment.split(PAIR_DELIMITER):
            pair = item.split(SUBJECT_DELIMITER)

            if len(pair) != 2:
                continue

            subject = pair[0].strip()

            try:
                grade = float(pair[1].strip())

            except ValueError:
                continue

            if subject:
                grade_set.add_or_update(subject, grade)

        return grade_set

    def to_dict(self) -> dict[str, float]:
        return dict(self.items())

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._grades)

    def __contains__(self, subject: object) -> bool:
        return subject in self._grades

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradeSet):
            return NotImplemented
        return self._grades == other._grades

    def __repr__(self) -> str:
        return f"GradeSet({self.to_dict()})"

    # === data accessors ===

    def get(self, subject: str) -> float | None:
        return self._grades.get(subject)

    def items(self) -> list[tuple[str, float]]:
        return sorted(self._grades.items())

    def average(self) -> float:
        if not self._grades:
            return 0.0
        return sum(self._grades.values()) / len(self._grades)

    # === data manipulators ===

    def add_or_update(self, subject: str, grade: float) -> None:
        self._grades[subject] = float(grade)
