"""Shared pytest setup.

Points log output at a temporary directory before any project module
reads its configuration.
"""

import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="pwstrength-logs-"))
os.environ.setdefault("RATE_LIMIT", "1000/minute")
