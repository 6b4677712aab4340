"""Centralized file system helpers for log output.

Log directories are created owner-only on Unix systems.
"""

import os
import sys

from core.config import LOG_DIR


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def ensure_directories() -> None:
    """Create the log directory if it doesn't exist.

    On Unix systems, the directory is created with mode 0700 (owner only).

    Raises:
        StorageError: If the directory cannot be created
    """
    try:
        if sys.platform != "win32":
            os.makedirs(LOG_DIR, mode=0o700, exist_ok=True)
        else:
            os.makedirs(LOG_DIR, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Failed to create {LOG_DIR}: {e}")


def file_exists(filepath: str) -> bool:
    """Check if file exists."""
    return os.path.exists(filepath)
