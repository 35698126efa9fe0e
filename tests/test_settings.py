"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from s2i_demo.config.settings import Settings, get_settings


class TestPort:
    def test_defaults_to_8080(self) -> None:
        assert Settings(_env_file=None).PORT == 8080

    def test_empty_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "")
        assert Settings(_env_file=None).PORT == 8080

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9090")
        assert Settings(_env_file=None).PORT == 9090

    @pytest.mark.parametrize("value", ["abc", "0", "70000"])
    def test_invalid_port_rejected(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("PORT", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestEnvironment:
    def test_defaults_to_development(self) -> None:
        assert Settings(_env_file=None).ENVIRONMENT == "development"

    def test_empty_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "")
        assert Settings(_env_file=None).ENVIRONMENT == "development"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        assert Settings(_env_file=None).ENVIRONMENT == "staging"


class TestLogLevel:
    def test_normalized_to_upper_case(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_unknown_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
