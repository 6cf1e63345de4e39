# cli/path_utils.py

import os

DEFAULT_DB_FILENAME = "students_db.txt"


def get_default_db_path() -> str:
    """
    Returns the absolute path of the default roster file in the current working directory.
    """
    return os.path.abspath(DEFAULT_DB_FILENAME)


def resolve_db_path(user_input: str | None) -> str:
    """
    Resolves a roster file path from user input or the default location.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the default path is used.

    Returns:
        An absolute path string. User input has `~` expanded before it is made absolute.
    """
    if user_input is None or not user_input.strip():
        return get_default_db_path()

    return os.path.abspath(os.path.expanduser(user_input.strip()))


def db_file_exists(file_path: str) -> bool:
    return os.path.isfile(file_path)
