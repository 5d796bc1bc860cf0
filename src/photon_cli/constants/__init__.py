"""Constants module - all constants and magic string replacements."""

from importlib.metadata import PackageNotFoundError, version

from photon_cli.constants.providers import (
    APP_REFERER,
    APP_TITLE,
    ONLINE_MODEL_PREFIX,
    OPENROUTER_API_BASE,
    OPENROUTER_CHAT_URL,
)
from photon_cli.constants.timeouts import (
    DEFAULT_HTTP_CONNECT_TIMEOUT,
    DEFAULT_HTTP_REQUEST_TIMEOUT,
    QUERY_DEADLINE,
)

# Application constants
APP_NAME = "photon-cli"

# Get version from package metadata
try:
    APP_VERSION = version("photon-cli")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

__all__ = [
    # Providers
    "OPENROUTER_API_BASE",
    "OPENROUTER_CHAT_URL",
    "APP_REFERER",
    "APP_TITLE",
    "ONLINE_MODEL_PREFIX",
    # Timeouts
    "QUERY_DEADLINE",
    "DEFAULT_HTTP_CONNECT_TIMEOUT",
    "DEFAULT_HTTP_REQUEST_TIMEOUT",
    # App constants
    "APP_NAME",
    "APP_VERSION",
]
