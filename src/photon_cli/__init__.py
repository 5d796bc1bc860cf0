"""Photon: a terminal research assistant backed by OpenRouter models."""

from photon_cli.constants import APP_VERSION

__version__ = APP_VERSION
