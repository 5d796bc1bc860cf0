"""Default configuration values - no more magic numbers!

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations

from pathlib import Path


# ================================================================
# Model Defaults
# ================================================================

DEFAULT_MODEL_ID = "deepseek-v3"
"""Registry id used when nothing else is configured."""


# ================================================================
# Path Defaults
# ================================================================

DEFAULT_CONFIG_DIR = Path.home() / ".photon"
"""Directory holding the persisted configuration."""

DEFAULT_CONFIG_FILENAME = "config.json"
"""Configuration filename inside the config directory."""

DOTENV_PATHS = ("configs/.env", ".env")
"""Dotenv files loaded at startup, in order. Existing env vars win."""


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
"""Default log level for the console handler."""

DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
"""Maximum size of a log file before rotation."""

DEFAULT_LOG_BACKUP_COUNT = 3
"""Number of rotated log files to keep."""
