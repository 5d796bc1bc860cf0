# tests/config/test_env_vars.py
"""Tests for environment variable helpers."""

from __future__ import annotations

import pytest

from photon_cli.config.env_vars import (
    EnvVar,
    get_env,
    get_env_float,
    get_env_positive_float,
)


class TestEnvVar:
    def test_values(self) -> None:
        assert EnvVar.OPEN_ROUTER_KEY.value == "PHOTON_OPEN_ROUTER_KEY"
        assert EnvVar.CONFIG_DIR.value == "PHOTON_CONFIG_DIR"

    def test_all_prefixed(self) -> None:
        assert all(var.value.startswith("PHOTON_") for var in EnvVar)


class TestGetEnv:
    def test_default(self) -> None:
        assert get_env(EnvVar.MODEL) is None
        assert get_env(EnvVar.MODEL, "kimi") == "kimi"

    def test_set_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(EnvVar.MODEL.value, "mistral")
        assert get_env(EnvVar.MODEL, "kimi") == "mistral"


class TestGetEnvFloat:
    @pytest.mark.parametrize("raw,expected", [("2.5", 2.5), ("30", 30.0), ("soon", 15.0)])
    def test_parse(self, monkeypatch: pytest.MonkeyPatch, raw, expected) -> None:
        monkeypatch.setenv(EnvVar.QUERY_DEADLINE.value, raw)
        assert get_env_float(EnvVar.QUERY_DEADLINE, 15.0) == expected

    def test_unset(self) -> None:
        assert get_env_float(EnvVar.QUERY_DEADLINE, 15.0) == 15.0


class TestGetEnvPositiveFloat:
    def test_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(EnvVar.QUERY_DEADLINE.value, "0.5")
        assert get_env_positive_float(EnvVar.QUERY_DEADLINE, 15.0) == 0.5

    @pytest.mark.parametrize("raw", ["nan", "-1.0", "0", "0.0", "inf", "-inf", "soon", ""])
    def test_out_of_range_uses_default(self, monkeypatch: pytest.MonkeyPatch, raw) -> None:
        monkeypatch.setenv(EnvVar.QUERY_DEADLINE.value, raw)
        assert get_env_positive_float(EnvVar.QUERY_DEADLINE, 15.0) == 15.0

    def test_unset(self) -> None:
        assert get_env_positive_float(EnvVar.QUERY_DEADLINE, 15.0) == 15.0
