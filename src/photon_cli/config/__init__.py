"""
Configuration for Photon.

- env_vars: type-safe environment variable access
- defaults: default values
- logging: centralized logging setup
- settings: the persisted PhotonConfig (import from photon_cli.config.settings)
"""

from photon_cli.config.env_vars import (
    EnvVar,
    get_env,
    get_env_float,
    get_env_positive_float,
)
from photon_cli.config.logging import setup_logging

__all__ = [
    "EnvVar",
    "get_env",
    "get_env_float",
    "get_env_positive_float",
    "setup_logging",
]
