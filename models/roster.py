# models/roster.py

"""
The Roster model is the central data object of the program and represents the "source of truth" for all student records.

Students are kept in insertion order and are unique by their numeric ID. The whole roster is written to a single
`|`-delimited text file upon saving, one student per line, and is replaced wholesale when a file is loaded.

Provides functions for adding, removing, and finding students, recording grades, and producing a pass/fail report.
Includes attributes that are session-scoped like path (current save location) and unsaved_changes (unsaved mutations).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from core.response import ErrorCode, Response
from models.student import Student

logger = logging.getLogger(__name__)


class Roster:

    def __init__(self, file_path: str | None = None):
        self._students: list[Student] = []
        self._file_path: str | None = file_path
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    @property
    def path(self) -> str | None:
        return self._file_path

    # --- status markers ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === persistence and import ===

    def save(self, file_path: str | None = None) -> Response:
        """
        Writes every student to disk, one line per student, in roster order.

        Args:
            file_path (str | None):
                - The file the roster is written to.
                - If no argument is provided, `self.path` will be used by default.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was written to disk.
                    - False if no file path is known or the file cannot be written.
                - detail (str | None):
                    - On success, a confirmation naming the file.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if there is no file path to write to.
                    - `ErrorCode.IO_ERROR` if OSError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "path" (str): The file that was written.
                        - "saved" (int): The number of students written.

        Notes:
            - This intentionally overwrites any existing file; nothing is appended.
            - The write is not atomic, so an interrupted save can leave a truncated file.
            - On success the written file becomes `self.path` and unsaved changes are cleared.
        """
        file_path = file_path or self._file_path

        if not file_path:
            return Response.fail(
                detail="No file path was given and the roster has no default save location.",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            lines = [student.to_line() for student in self._students]

            with open(
                file_path,
                "w",
                encoding="utf-8",
                errors="surrogateescape",
                newline="\n",
            ) as f:
                f.writelines(f"{line}\n" for line in lines)

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write roster to {file_path}: {e}",
                error=ErrorCode.IO_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._file_path = file_path
            self._unsaved_changes = False

            logger.info("Saved %d student(s) to %s", len(lines), file_path)

            return Response.succeed(
                detail=f"Roster saved to {file_path}.",
                data={
                    "path": file_path,
                    "saved": len(lines),
                },
            )

    def load(self, file_path: str | None = None, strict: bool = False) -> Response:
        """
        Reads a roster file from disk and replaces every student currently in memory.

        Args:
            file_path (str | None):
                - The file to read.
                - If no argument is provided, `self.path` will be used by default.
            strict (bool, optional): If True, a file that repeats a student ID is rejected. Defaults to False.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read and the roster replaced.
                    - False if the file cannot be read, or if `strict` is set and the file repeats an ID.
                - detail (str | None):
                    - On success, a confirmation naming the file.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if there is no file path to read from.
                    - `ErrorCode.IO_ERROR` if the file cannot be opened.
                    - `ErrorCode.DUPLICATE_ID` if `strict` is set and an ID repeats.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "path" (str): The file that was read.
                        - "loaded" (int): The number of students now on the roster.
                        - "skipped" (int): The number of non-empty lines that could not be parsed.

        Notes:
            - Existing students are discarded only after the whole file has been read and parsed.
            - Empty lines are ignored. Lines with fewer than five fields or a non-integer ID are skipped, not reported as errors.
            - By default repeated IDs are loaded as-is, so the roster may hold more than one student with the same ID.
            - Bytes that are not valid UTF-8 are kept as-is and written back unchanged by `save()`.
        """
        file_path = file_path or self._file_path

        if not file_path:
            return Response.fail(
                detail="No file path was given and the roster has no default save location.",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            with open(file_path, "r", encoding="utf-8", errors="surrogateescape") as f:
                lines = f.read().split("\n")

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read roster from {file_path}: {e}",
                error=ErrorCode.IO_ERROR,
            )

        try:
            students, skipped = self._parse_lines(lines)

            if strict:
                self._require_unique_ids(students)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.DUPLICATE_ID,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._students = students
            self._file_path = file_path
            self._unsaved_changes = False

            logger.info(
                "Loaded %d student(s) from %s, skipped %d line(s)",
                len(students),
                file_path,
                skipped,
            )

            return Response.succeed(
                detail=f"Roster loaded from {file_path}.",
                data={
                    "path": file_path,
                    "loaded": len(students),
                    "skipped": skipped,
                },
            )

    def _parse_lines(self, lines: list[str]) -> tuple[list[Student], int]:
        """
        Converts raw file lines into `Student` objects.

        Args:
            lines (list[str]): The file contents split on newlines.

        Returns:
            A tuple of the parsed students, in file order, and the number of skipped lines.
        """
        students: list[Student] = []
        skipped = 0

        for line_number, line in enumerate(lines, 1):
            if not line:
                continue

            try:
                students.append(Student.from_line(line))

            except ValueError as e:
                skipped += 1
                logger.debug("Skipping line %d: %s", line_number, e)

        return students, skipped

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def __repr__(self) -> str:
        return f"Roster({self._file_path}, {len(self._students)} students)"

    # === data accessors ===

    def find_student_by_id(self, id: int) -> Response:
        """
        Finds a `Student` object by ID with a linear scan of the roster.

        Args:
            id (int): The numeric ID of the student.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.

        Notes:
            - This method is read-only and does not raise.
            - If the roster was loaded with repeated IDs, the first match in roster order is returned.
        """
        index = self._index_of(id)

        if index is None:
            return Response.fail(
                detail=f"No student found with ID {id}.",
                error=ErrorCode.NOT_FOUND,
            )

        return Response.succeed(
            data={
                "record": self._students[index],
            },
        )

    def pass_fail_report(self, cutoff: float) -> Response:
        """
        Compares every student's average against a passing cutoff.

        Args:
            cutoff (float): The minimum average required to pass.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the report was produced, even for an empty roster.
                    - False if the cutoff is not a number or for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if the cutoff is not numeric.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "cutoff" (float): The cutoff that was applied.
                        - "results" (list[tuple[Student, float, bool]]): One (student, average, passed) entry per student, in roster order.

        Notes:
            - This method is read-only.
            - A student passes when their average is greater than or equal to the cutoff.
            - Students without grades have an average of 0.0.
        """
        try:
            cutoff = float(cutoff)

            results = [
                (student, student.average(), student.average() >= cutoff)
                for student in self._students
            ]

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid cutoff value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "cutoff": cutoff,
                    "results": results,
                },
            )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    # --- student manipulation ---

    def add_student(self, student: Student) -> Response:
        """
        Appends a `Student` object to the end of the roster.

        Args:
            student (Student): The `Student` object to be added to the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if another student with the same ID already exists or for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_ID` if the ID is already taken.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.

        Notes:
            - The roster is left unchanged on failure.
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
        """
        try:
            self.require_unique_student_id(student.id)

            self._students.append(student)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.DUPLICATE_ID,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._mark_dirty()

            kind = "Graduate student" if student.is_graduate else "Regular student"

            return Response.succeed(
                detail=f"{kind} added.",
                data={
                    "record": student,
                },
            )

    def remove_student(self, id: int) -> Response:
        """
        Removes the `Student` with the given ID from the roster.

        Args:
            id (int): The numeric ID of the student to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was removed.
                    - False if no student has that ID.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has that ID.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed `Student` object.

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
        """
        index = self._index_of(id)

        if index is None:
            return Response.fail(
                detail=f"No student found with ID {id}.",
                error=ErrorCode.NOT_FOUND,
            )

        student = self._students.pop(index)

        self._mark_dirty()

        return Response.succeed(
            detail="Student removed.",
            data={
                "record": student,
            },
        )

    def add_or_update_grade(self, id: int, subject: str, grade: float) -> Response:
        """
        Records a grade for one subject of the `Student` with the given ID.

        Args:
            id (int): The numeric ID of the student.
            subject (str): The subject name.
            grade (float): The grade to record. Any numeric value is accepted.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the grade was recorded.
                    - False if no student has that ID or the grade is not numeric.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has that ID.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the grade cannot be converted to a float.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The updated `Student` object.

        Notes:
            - An existing grade for the same subject is overwritten.
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
        """
        lookup_response = self.find_student_by_id(id)

        if not lookup_response.success:
            return lookup_response

        student = lookup_response.data["record"]

        try:
            student.add_grade(subject, float(grade))

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid grade value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        else:
            self._mark_dirty()

            return Response.succeed(
                detail="Grade saved.",
                data={
                    "record": student,
                },
            )

    # === data validators ===

    def require_unique_student_id(self, id: int) -> None:
        """
        Validates that no existing student shares the given ID.

        Args:
            id (int): The student ID to validate for uniqueness.

        Raises:
            ValueError: If a student with the same ID already exists.
        """
        if self._index_of(id) is not None:
            raise ValueError(f"A student with ID {id} already exists.")

    def _require_unique_ids(self, students: list[Student]) -> None:
        seen: set[int] = set()

        for student in students:
            if student.id in seen:
                raise ValueError(f"Student ID {student.id} appears more than once.")
            seen.add(student.id)

    # === helper methods ===

    def _index_of(self, id: int) -> int | None:
        for index, student in enumerate(self._students):
            if student.id == id:
                return index
        return None
