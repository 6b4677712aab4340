"""Password generation CLI flows.

Handles password generation, masked preview and strength analysis.
Implements secure password display to prevent history leakage.
"""

import secrets
import string

from core import DEFAULT_PASSWORD_LENGTH, mask_password
from password_checker import check_password_strength, StrengthResult

from cli.display import render_report


GENERATOR_SYMBOLS = "!@#$%^&*()"
GENERATOR_ALPHABET = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits + GENERATOR_SYMBOLS
)


def _try_copy_to_clipboard(text: str) -> bool:
    """Attempt to copy text to the clipboard with pyperclip.

    Args:
        text: Text to copy to clipboard

    Returns:
        True if successfully copied, False otherwise
    """
    try:
        import pyperclip
    except ImportError:
        return False

    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException:
        return False


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH) -> str:
    """Generate a random password from the fixed generator alphabet.

    Characters are drawn uniformly with replacement using the secrets
    module, so no character class is guaranteed to appear.

    Args:
        length: Password length

    Returns:
        Generated password string

    Raises:
        ValueError: If length is not positive
    """
    if length < 1:
        raise ValueError("Password length must be at least 1.")

    return ''.join(secrets.choice(GENERATOR_ALPHABET) for _ in range(length))


def preview_and_analyze(password: str) -> StrengthResult:
    """Display password securely and analyze its strength.

    Copies password to clipboard instead of displaying it in the terminal
    to prevent exposure in shell history. Falls back to masked display if
    clipboard is unavailable.

    Args:
        password: Password to analyze

    Returns:
        The strength result for the password
    """
    if _try_copy_to_clipboard(password):
        print("\n[PASSWORD COPIED TO CLIPBOARD]")
        print(f"Preview (masked): {mask_password(password, show_chars=4)}")
    else:
        print(f"\nGenerated Password (masked): {mask_password(password, show_chars=4)}")
        reveal = input("Show full password? (y/n - WARNING: visible in terminal history): ").strip().lower()
        if reveal == 'y':
            print(f"Full Password: {password}")

    result = check_password_strength(password)
    print(render_report(result))
    return result


def generate_password_flow() -> None:
    """Generate a password and show its analysis."""
    print("\n--- Password Generation ---")

    password = generate_password()
    preview_and_analyze(password)
