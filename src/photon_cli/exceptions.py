# src/photon_cli/exceptions.py
"""Exception hierarchy for Photon.

Registry and config failures are raised to the immediate caller. Transport
failures are raised by the client and folded into the research result by
the service layer, so the UI always has something to show.
"""

from __future__ import annotations


class PhotonError(Exception):
    """Base exception for all Photon errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ModelNotFoundError(PhotonError):
    """Unknown model id or API name."""

    def __init__(self, identifier: str, message: str | None = None):
        super().__init__(message or f"model '{identifier}' not found")
        self.identifier = identifier


class MissingCredentialError(PhotonError):
    """The OpenRouter API key is not configured."""

    def __init__(self, env_var: str, message: str | None = None):
        super().__init__(message or f"{env_var} environment variable is required")
        self.env_var = env_var


class TransportError(PhotonError):
    """The request to the LLM provider failed at the network level."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ConfigError(PhotonError):
    """Invalid or unwritable configuration."""
