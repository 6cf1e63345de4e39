# cli/menus/reports_menu.py

"""
Report actions for the Grade Manager CLI.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from models.roster import Roster


def show_pass_fail(roster: Roster) -> None:
    """
    Prompts for a cutoff and prints a PASS/FAIL line for every student.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - Students without grades are reported with an average of 0.00.
    """
    if len(roster) == 0:
        print("\nNo students available.")
        return

    cutoff = helpers.prompt_float_input(
        "Enter cutoff percentage for pass (e.g., 50):",
        "Invalid. Enter numeric cutoff:",
    )

    roster_response = roster.pass_fail_report(cutoff)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"\n{model_formatters.format_pass_fail_header(cutoff)}")

    helpers.display_results(
        roster_response.data["results"],
        lambda result: model_formatters.format_pass_fail_line(*result),
    )
