"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import math
import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names used by Photon."""

    # ================================================================
    # Credentials
    # ================================================================
    OPEN_ROUTER_KEY = "PHOTON_OPEN_ROUTER_KEY"

    # ================================================================
    # Model / Query Configuration
    # ================================================================
    MODEL = "PHOTON_MODEL"
    QUERY_DEADLINE = "PHOTON_QUERY_DEADLINE"

    # ================================================================
    # Paths and Logging
    # ================================================================
    CONFIG_DIR = "PHOTON_CONFIG_DIR"
    LOG_LEVEL = "PHOTON_LOG_LEVEL"


# ================================================================
# Type-Safe Helper Functions
# ================================================================


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Example:
        >>> key = get_env(EnvVar.OPEN_ROUTER_KEY)
    """
    return os.getenv(var.value, default)


def get_env_float(var: EnvVar, default: float | None = None) -> float | None:
    """Get environment variable as float.

    Args:
        var: EnvVar enum member
        default: Default value if not set or invalid

    Returns:
        Float value or default

    Example:
        >>> deadline = get_env_float(EnvVar.QUERY_DEADLINE, 15.0)
    """
    value = get_env(var)
    if value is None:
        return default

    try:
        return float(value)
    except ValueError:
        return default


def get_env_positive_float(var: EnvVar, default: float) -> float:
    """Get environment variable as a finite float greater than zero.

    Unset, unparsable, zero, negative, NaN and infinite values all give
    ``default``.

    Example:
        >>> deadline = get_env_positive_float(EnvVar.QUERY_DEADLINE, 15.0)
    """
    value = get_env_float(var)
    if value is None or not math.isfinite(value) or value <= 0:
        return default
    return value
