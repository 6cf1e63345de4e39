# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Grade Manager application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input, including numeric input with retry
- Handling confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index][1]

        except (ValueError, IndexError):
            print("Unknown choice. Please try again.")


def display_results(
    results: Iterable[Any],
    formatter: Callable[[Any], str] = lambda x: str(x),
    separator: str | None = None,
) -> None:
    """
    Prints a list of results to the console, optionally separated by a divider line.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
        separator (str | None, optional): A line printed after each result. Defaults to None.
    """
    for result in results:
        print(formatter(result))

        if separator is not None:
            print(separator)


# === input and confirmation methods ===

# ---
# Input helpers strip whitespace from every response. Blank input is mapped per helper:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` and the numeric prompts loop until the user enters a valid response.
# ---


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_int_input(
    prompt: str, retry_prompt: str = "Invalid. Enter a whole number:"
) -> int:
    response = prompt_user_input(prompt)

    while True:
        try:
            return int(response)

        except ValueError:
            response = prompt_user_input(retry_prompt)


def prompt_float_input(
    prompt: str, retry_prompt: str = "Invalid. Enter a number:"
) -> float:
    response = prompt_user_input(prompt)

    while True:
        try:
            return float(response)

        except ValueError:
            response = prompt_user_input(retry_prompt)


def prompt_choice_input(prompt: str, choices: list[str]) -> str:
    """
    Prompts until the user enters one of the allowed choices.

    Args:
        prompt (str): The message displayed to the user.
        choices (list[str]): The accepted responses.

    Returns:
        The matching choice, exactly as listed in `choices`.
    """
    while True:
        response = prompt_user_input(prompt)

        if response in choices:
            return response

        print(f"Enter one of: {', '.join(choices)}.")


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_success(response: Response) -> None:
    if response.success and response.detail:
        print(f"\n{response.detail}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
