# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_divider(width: int = 19) -> str:
    return "-" * width


# === grade formatters ===


def format_grade(grade: float) -> str:
    """
    Renders a grade in its default decimal text form.

    Integral values drop the fractional part (`90.0` -> `"90"`), everything else uses
    the shortest representation that parses back to the same float (`85.5` -> `"85.5"`).

    Args:
        grade (float): The grade to render.

    Returns:
        The grade as text, suitable for both display and the persisted grade fragment.
    """
    grade = float(grade)

    if grade.is_integer():
        return str(int(grade))

    return repr(grade)


def format_grade_fixed(grade: float) -> str:
    return f"{grade:.2f}"


def format_average(average: float | None) -> str:
    return "N/A" if average is None else f"{average:.2f}"


def format_pass_fail(passed: bool) -> str:
    return "PASS" if passed else "FAIL"
