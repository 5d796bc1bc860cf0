"""Common test fixtures for Photon CLI tests."""

import pytest

from photon_cli.config.env_vars import EnvVar


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.photon and any PHOTON_* settings."""
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)
    config_dir = tmp_path / "photon-config"
    monkeypatch.setenv(EnvVar.CONFIG_DIR.value, str(config_dir))
    monkeypatch.chdir(tmp_path)
    yield config_dir


@pytest.fixture
def config_dir(isolated_env):
    return isolated_env


@pytest.fixture
def api_key(monkeypatch):
    key = "sk-or-test-0123456789abcdef"
    monkeypatch.setenv(EnvVar.OPEN_ROUTER_KEY.value, key)
    return key
