"""Shared CLI prompt utilities.

Common input prompts used across CLI flows.
"""

import getpass
from typing import Optional


def confirm_action(prompt: str) -> bool:
    """Prompt for a y/n confirmation.

    Args:
        prompt: Question to ask

    Returns:
        True if confirmed, False otherwise
    """
    response = input(f"{prompt} (y/n): ").strip().lower()
    return response == 'y'


def prompt_for_password(show: bool = False) -> Optional[str]:
    """Prompt for a password, hidden unless show is set.

    Args:
        show: Echo the password while typing

    Returns:
        The entered password, or None if nothing was entered
    """
    message = "Enter the password you want to test: "
    if show:
        value = input(message)
    else:
        value = getpass.getpass(message)

    return value or None
