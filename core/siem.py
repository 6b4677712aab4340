"""SIEM-compatible logging for the password intake endpoint.

Every received password produces two records:
- a human-readable line on the intake logger (rotating file + console)
- a structured JSON event suitable for Splunk, ELK or QRadar

Both files rotate by size to prevent disk exhaustion.
"""

import json
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    INTAKE_LOG_FILE,
    SIEM_LOG_FILE,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    LOG_PLAINTEXT_PASSWORDS,
)
from core.storage import ensure_directories, file_exists


INTAKE_LOGGER_NAME = "password_strength.intake"
SIEM_LOGGER_NAME = "password_strength.siem"

intake_logger = logging.getLogger(INTAKE_LOGGER_NAME)
siem_logger = logging.getLogger(SIEM_LOGGER_NAME)

# Module-level state
_logging_configured = False
_config_lock = Lock()


def _configure_logging() -> None:
    """Attach rotating handlers to the intake and SIEM loggers on first use."""
    global _logging_configured
    with _config_lock:
        if _logging_configured:
            return

        ensure_directories()

        intake_handler = RotatingFileHandler(
            INTAKE_LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        intake_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(message)s'))

        intake_logger.setLevel(logging.INFO)
        intake_logger.addHandler(intake_handler)
        intake_logger.addHandler(console_handler)

        # One JSON document per line, nothing else
        siem_handler = RotatingFileHandler(
            SIEM_LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        siem_handler.setFormatter(logging.Formatter('%(message)s'))
        siem_logger.setLevel(logging.INFO)
        siem_logger.addHandler(siem_handler)
        siem_logger.propagate = False

        _logging_configured = True


def mask_password(password: str, show_chars: int = 0) -> str:
    """Create a masked version of a password.

    Args:
        password: Password to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked password string like "Ab12****xy9!", or all asterisks
        when show_chars is 0 or the password is too short
    """
    if show_chars <= 0 or len(password) <= show_chars * 2:
        return "*" * len(password)

    return password[:show_chars] + "*" * (len(password) - show_chars * 2) + password[-show_chars:]


def log_siem_event(
    event_type: str,
    status: str,
    source_ip: str = "127.0.0.1",
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of event (e.g., 'password_received')
        status: Event status (e.g., 'RECEIVED')
        source_ip: Source IP address
        details: Optional additional event details
    """
    _configure_logging()

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "ip_address": source_ip,
        "source": "intake_api"
    }

    if details:
        event["details"] = details

    siem_logger.info(json.dumps(event))


def log_password_received(password: str, source_ip: str = "127.0.0.1") -> None:
    """Record a password submitted to the intake endpoint.

    The value is masked unless LOG_PLAINTEXT_PASSWORDS is enabled.

    Args:
        password: The submitted password
        source_ip: Source IP address of the request
    """
    _configure_logging()

    shown = password if LOG_PLAINTEXT_PASSWORDS else mask_password(password)
    intake_logger.info(f"Received password: {shown}")

    log_siem_event(
        "password_received",
        "RECEIVED",
        source_ip=source_ip,
        details={"length": len(password), "logged_plaintext": LOG_PLAINTEXT_PASSWORDS},
    )


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries
    """
    if limit <= 0 or not file_exists(SIEM_LOG_FILE):
        return []

    events = []
    with open(SIEM_LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count SIEM events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    events = get_siem_events(limit=10000)
    counts = {}

    for event in events:
        if event_type and event.get("event_type") != event_type:
            continue

        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1

    return counts
