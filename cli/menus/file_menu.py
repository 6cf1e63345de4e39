# cli/menus/file_menu.py

"""
Save and load actions for the Grade Manager CLI.

Both actions ask for a file path and fall back to the default roster file when the input is left blank.
"""

import cli.menu_helpers as helpers
from cli.path_utils import DEFAULT_DB_FILENAME, resolve_db_path
from models.roster import Roster


def prompt_db_path(action: str) -> str:
    path_input = helpers.prompt_user_input_or_none(
        f"Enter filename to {action} (or press Enter for default '{DEFAULT_DB_FILENAME}'):"
    )

    return resolve_db_path(path_input)


def save_roster(roster: Roster) -> None:
    file_path = prompt_db_path("save")

    roster_response = roster.save(file_path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\nFailed to save to {file_path}")
        return

    print(f"\nSaved to {file_path}")


def load_roster(roster: Roster) -> None:
    """
    Replaces the in-memory roster with the contents of a roster file.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - If there are unsaved changes, the user must confirm before they are discarded.
        - Malformed lines are skipped; the number skipped is reported after loading.
    """
    if roster.has_unsaved_changes and not helpers.confirm_action(
        "Loading will discard unsaved changes. Continue?"
    ):
        helpers.returning_without_changes()
        return

    file_path = prompt_db_path("load")

    roster_response = roster.load(file_path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\nFailed to load from {file_path}")
        return

    print(f"\nLoaded from {file_path}")

    skipped = roster_response.data["skipped"]

    if skipped:
        print(f"({skipped} malformed line(s) were skipped.)")
