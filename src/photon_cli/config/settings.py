# src/photon_cli/config/settings.py
"""
Persisted user configuration.

The config file lives at ``~/.photon/config.json`` (or under
``$PHOTON_CONFIG_DIR``). The API key is normally supplied through the
environment or a .env file; when it comes from the environment it is
never written back to disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from photon_cli.config.defaults import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_MODEL_ID,
    DOTENV_PATHS,
)
from photon_cli.config.env_vars import EnvVar, get_env
from photon_cli.exceptions import ConfigError, MissingCredentialError
from photon_cli.model_management import (
    ModelRef,
    is_online_identifier,
    is_valid_model,
    parse_model_ref,
)

logger = logging.getLogger(__name__)


def load_env_files(paths: tuple[str, ...] = DOTENV_PATHS) -> list[str]:
    """
    Load dotenv files into the process environment.

    Missing files are skipped; variables already set are not overridden.

    Returns:
        The paths that were found and loaded
    """
    loaded = []
    for path in paths:
        if Path(path).is_file():
            load_dotenv(path, override=False)
            loaded.append(path)
            logger.debug(f"Loaded environment from {path}")
    return loaded


def get_config_path(config_dir: Path | None = None) -> Path:
    """Return the config file path, honouring PHOTON_CONFIG_DIR."""
    if config_dir is None:
        env_dir = get_env(EnvVar.CONFIG_DIR)
        config_dir = Path(env_dir).expanduser() if env_dir else DEFAULT_CONFIG_DIR
    return config_dir / DEFAULT_CONFIG_FILENAME


class PhotonConfig(BaseModel):
    """User configuration: API key and the selected model."""

    openrouter_key: str | None = Field(
        default=None, description="OpenRouter API key (file-stored, optional)"
    )
    current_model: str = Field(
        default=DEFAULT_MODEL_ID,
        description="Registry id or __online__<api-name>",
    )

    _path: Path | None = PrivateAttr(default=None)
    _file_key: str | None = PrivateAttr(default=None)

    # ── Loading / saving ─────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: Path | None = None) -> PhotonConfig:
        """
        Load configuration: defaults, then the config file, then the environment.

        A missing or corrupt config file is not an error; defaults are used.
        """
        path = path or get_config_path()
        config = cls()

        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                config = cls.model_validate(data)
                logger.debug(f"Loaded config from {path}")
            except (OSError, json.JSONDecodeError, ValidationError) as e:
                logger.warning(f"Ignoring unreadable config file {path}: {e}")
                config = cls()

        config._path = path
        config._file_key = config.openrouter_key

        # Environment always wins for the API key and model
        env_key = get_env(EnvVar.OPEN_ROUTER_KEY)
        if env_key:
            config.openrouter_key = env_key
        env_model = get_env(EnvVar.MODEL)
        if env_model:
            config.current_model = env_model

        return config

    def save(self) -> Path:
        """
        Write the configuration to disk.

        Raises:
            ConfigError: if the file cannot be written
        """
        path = self._path or get_config_path()
        data = {"current_model": self.current_model}
        # Only persist a key that came from the file, never one from the env
        if self._file_key:
            data["openrouter_key"] = self._file_key

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not save config to {path}: {e}") from e

        self._path = path
        logger.debug(f"Saved config to {path}")
        return path

    # ── Accessors ────────────────────────────────────────────────────────────

    def get_openrouter_key(self) -> str | None:
        """Return the API key from config or environment."""
        return self.openrouter_key or get_env(EnvVar.OPEN_ROUTER_KEY) or None

    def get_current_model(self) -> str:
        """Return the current model identifier, defaulting if unset."""
        return self.current_model or DEFAULT_MODEL_ID

    def get_model_ref(self) -> ModelRef:
        """Return the current model as a ModelRef."""
        return parse_model_ref(self.get_current_model())

    def validate_settings(self) -> None:
        """
        Check that a query can be made with this configuration.

        Raises:
            MissingCredentialError: if no API key is available
            ConfigError: if the current model is neither registered nor online
        """
        if not self.get_openrouter_key():
            raise MissingCredentialError(EnvVar.OPEN_ROUTER_KEY.value)

        model_id = self.current_model
        if model_id and not is_valid_model(model_id) and not is_online_identifier(model_id):
            raise ConfigError(f"invalid model '{model_id}'")

    def set_current_model(self, model_id: str) -> Path:
        """
        Select a registered model and persist the choice.

        Raises:
            ConfigError: if the id is not in the registry or saving fails
        """
        if not is_valid_model(model_id):
            raise ConfigError(f"invalid model '{model_id}'")
        self.current_model = model_id
        return self.save()
