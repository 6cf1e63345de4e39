# cli/main.py

"""
Main Menu for the Grade Manager CLI.

Offers to load the default roster file on startup, dispatches the student, file, and report actions,
and saves to the default roster file on exit.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import file_menu, reports_menu, students_menu
from cli.path_utils import DEFAULT_DB_FILENAME, db_file_exists, get_default_db_path
from models.roster import Roster


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(formatters.format_banner_text("Welcome to Student Grade Manager"))

    roster = Roster(get_default_db_path())

    offer_startup_load(roster)

    title = formatters.format_banner_text("Main Menu")
    options = [
        ("Add Student", students_menu.add_student),
        ("Remove Student", students_menu.remove_student),
        ("Add/Update Grade", students_menu.add_or_update_grade),
        ("Display All Students", students_menu.display_all_students),
        ("Save to file", file_menu.save_roster),
        (
            "Load from file (will replace current in-memory data)",
            file_menu.load_roster,
        ),
        ("Show Pass/Fail report", reports_menu.show_pass_fail),
    ]
    zero_option = "Exit (saves automatically)"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program(roster)

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def offer_startup_load(roster: Roster) -> None:
    """
    Asks whether to load the default roster file, if one exists.

    Args:
        roster (Roster): The freshly created, empty `Roster`.

    Notes:
        - Does nothing when the default file is missing.
        - A failed load leaves the roster empty and the program continues.
    """
    if not db_file_exists(get_default_db_path()):
        return

    if not helpers.confirm_action(f"Load saved data from {DEFAULT_DB_FILENAME}?"):
        return

    roster_response = roster.load()

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nFailed to load file or file corrupted.")
        return

    print("\nData loaded from file.")


def exit_program(roster: Roster) -> None:
    """
    Saves the roster to the default file, displays an exit banner, and terminates the CLI program.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - The save always targets the default roster file, regardless of where the roster was last loaded from or saved to.
        - A failed save is reported but does not prevent the program from exiting.
    """
    print(f"\nSaving to {DEFAULT_DB_FILENAME} ...")

    roster_response = roster.save(get_default_db_path())

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("Failed to save file.")
    else:
        print("Done.")

    exit_banner = formatters.format_banner_text("Goodbye!")
    print(f"\n{exit_banner}\n")

    raise SystemExit
