# cli/model_formatters.py

# anything that renders domain objects for the terminal
import core.formatters as formatters
from models.student import Student

# === student formatters ===


def format_student_multiline(student: Student) -> str:
    return student.summary()


# === report formatters ===


def format_pass_fail_line(student: Student, average: float, passed: bool) -> str:
    return (
        f"ID: {student.id} | Name: {student.name}"
        f" | Average: {formatters.format_average(average)}"
        f" | {formatters.format_pass_fail(passed)}"
    )


def format_pass_fail_header(cutoff: float) -> str:
    return f"Pass/Fail report (cutoff = {formatters.format_grade(cutoff)})"
