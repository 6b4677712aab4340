"""CLI package for the password strength checker.

Provides modular CLI flows for testing and generating passwords.
"""

from cli.generator import generate_password, generate_password_flow
from cli.tester import test_password_flow

__all__ = [
    "generate_password",
    "generate_password_flow",
    "test_password_flow",
]
