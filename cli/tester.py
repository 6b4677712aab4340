"""Password testing CLI flows.

Allows users to test password strength.
"""

from password_checker import check_password_strength

from cli.display import render_report
from cli.prompts import confirm_action, prompt_for_password


def test_password_flow() -> None:
    """Allow user to test a password's strength."""
    print("\n--- Test a Password ---")

    show = confirm_action("Show the password while typing?")
    user_pwd = prompt_for_password(show=show)
    if not user_pwd:
        print("No password entered.")
        return

    print(render_report(check_password_strength(user_pwd)))
