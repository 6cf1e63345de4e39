# cli/menus/students_menu.py

"""
Student actions for the Grade Manager CLI.

This module defines the interface for managing student records, including:
- Adding regular and graduate students
- Removing students by ID
- Recording or updating a grade for one subject
- Displaying every student with their average and grades

All operations are routed through the `Roster` API for consistency, validation, and state tracking.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.roster import Roster
from models.student import Student

# characters that would corrupt the roster file if entered as text
RESERVED_NAME_CHARACTERS = ("|",)
RESERVED_SUBJECT_CHARACTERS = ("|", ",", ":")


# === add student ===


def add_student(roster: Roster) -> None:
    """
    Prompts for a new student and adds it to the roster.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - The ID is checked before the thesis title is requested, so a duplicate ID cancels early.
        - Additions are not saved automatically.
    """
    kind = helpers.prompt_choice_input(
        "Add Student - Regular (1) or Graduate (2)?", ["1", "2"]
    )

    name = prompt_text_input("Enter student name:", RESERVED_NAME_CHARACTERS)

    id = helpers.prompt_int_input("Enter numeric ID:", "Invalid. Enter numeric ID:")

    if roster.find_student_by_id(id).success:
        print(f"\nA student with ID {id} already exists. Cancelled.")
        return

    if kind == "1":
        new_student = Student.make_regular(name, id)

    else:
        thesis_title = prompt_text_input(
            "Enter thesis title:", RESERVED_NAME_CHARACTERS
        )
        new_student = Student.make_graduate(name, id, thesis_title)

    roster_response = roster.add_student(new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    helpers.display_response_success(roster_response)


# === remove student ===


def remove_student(roster: Roster) -> None:
    id = helpers.prompt_int_input(
        "Enter ID of student to remove:", "Invalid. Enter numeric ID:"
    )

    roster_response = roster.remove_student(id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    helpers.display_response_success(roster_response)


# === grades ===


def add_or_update_grade(roster: Roster) -> None:
    """
    Prompts for a student ID, subject, and grade, then records the grade.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - The student is looked up before the subject and grade are requested.
        - Grades are not range-checked; any number is accepted.
    """
    id = helpers.prompt_int_input("Enter student ID:", "Invalid. Enter numeric ID:")

    lookup_response = roster.find_student_by_id(id)

    if not lookup_response.success:
        helpers.display_response_failure(lookup_response)
        return

    subject = prompt_text_input(
        "Enter subject name:", RESERVED_SUBJECT_CHARACTERS, allow_blank=False
    )

    grade = helpers.prompt_float_input(
        "Enter grade (numeric):", "Invalid. Enter numeric grade:"
    )

    roster_response = roster.add_or_update_grade(id, subject, grade)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    helpers.display_response_success(roster_response)


# === view students ===


def display_all_students(roster: Roster) -> None:
    if len(roster) == 0:
        print("\nNo students to display.")
        return

    helpers.display_banner("All Students")

    helpers.display_results(
        roster.students,
        model_formatters.format_student_multiline,
        formatters.format_divider(),
    )


# === data input helpers ===


def prompt_text_input(
    prompt: str,
    reserved: tuple[str, ...],
    allow_blank: bool = True,
) -> str:
    """
    Solicits free-text input that can be written safely to the roster file.

    Args:
        prompt (str): The message displayed to the user.
        reserved (tuple[str, ...]): Characters the input must not contain.
        allow_blank (bool, optional): Whether an empty response is accepted. Defaults to True.

    Returns:
        The stripped user input.

    Notes:
        - The user is prompted again until the input is acceptable.
    """
    while True:
        if allow_blank:
            response = helpers.prompt_user_input(prompt)
        else:
            response = helpers.prompt_user_input_or_cancel(prompt)

            if response is MenuSignal.CANCEL:
                print("This field cannot be blank.")
                continue

        response = cast(str, response)

        if any(character in response for character in reserved):
            print(f"Input cannot contain any of: {' '.join(reserved)}")
            continue

        return response
