"""Password Strength Checker Core Package.

Provides shared components:
- config: Centralized configuration constants
- storage: Log directory helpers
- siem: Intake and security event logging
"""

# Configuration constants
from core.config import (
    HOST,
    PORT,
    LOG_DIR,
    INTAKE_LOG_FILE,
    SIEM_LOG_FILE,
    LOG_PLAINTEXT_PASSWORDS,
    RATE_LIMIT,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
)

# Storage
from core.storage import (
    StorageError,
    ensure_directories,
    file_exists,
)

# SIEM logging
from core.siem import (
    mask_password,
    log_siem_event,
    log_password_received,
    get_siem_events,
    count_events_by_status,
)

__all__ = [
    "HOST",
    "PORT",
    "LOG_DIR",
    "INTAKE_LOG_FILE",
    "SIEM_LOG_FILE",
    "LOG_PLAINTEXT_PASSWORDS",
    "RATE_LIMIT",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "DEFAULT_PASSWORD_LENGTH",
    "StorageError",
    "ensure_directories",
    "file_exists",
    "mask_password",
    "log_siem_event",
    "log_password_received",
    "get_siem_events",
    "count_events_by_status",
]
