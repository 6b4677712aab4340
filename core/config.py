"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment-sensitive settings can be overridden via environment variables.
"""

import os

# Service
API_VERSION = "1.0.0"

# Server
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
INTAKE_LOG_FILE = os.path.join(LOG_DIR, "intake.log")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "siem_events.jsonl")
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 5))

# SECURITY: Received passwords are masked in logs unless this is enabled.
# Plaintext logging reproduces the legacy intake server and should stay off
# anywhere real credentials may be submitted.
LOG_PLAINTEXT_PASSWORDS = os.environ.get("LOG_PLAINTEXT_PASSWORDS", "false").lower() == "true"

# Rate limiting (slowapi limit string)
RATE_LIMIT = os.environ.get("RATE_LIMIT", "100/minute")

# Password generation
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
DEFAULT_PASSWORD_LENGTH = 15

# Trusted proxy configuration
# SECURITY: Only trust X-Forwarded-For headers from these IP addresses
# Example: TRUSTED_PROXIES=10.0.0.1,10.0.0.2,172.17.0.1
_trusted_proxies_env = os.environ.get("TRUSTED_PROXIES", "")
TRUSTED_PROXIES: set[str] = set(
    ip.strip() for ip in _trusted_proxies_env.split(",") if ip.strip()
)

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# CORS origins allowed to call the API (the web client runs on port 3000)
_cors_origins_env = os.environ.get(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
)
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]
