"""Unit tests for RetrySettings and its loaders."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from retry_executor.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    RetrySettings,
    load_settings,
)

_KEYS = ("RETRY_DEFAULT_DELAY", "RETRY_DEFAULT_RETRY_LIMIT", "RETRY_LOG_LEVEL", "RETRY_LOG_JSON")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so load_dotenv writes are undone at teardown too
    for key in _KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# RetrySettings
# ---------------------------------------------------------------------------


class TestRetrySettings:
    def test_defaults_match_catalog_constants(self) -> None:
        s = RetrySettings()
        assert s.default_delay == 2.0
        assert s.default_retry_limit == 3
        assert s.log_level == "INFO"
        assert s.log_json is True

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RetrySettings().default_delay = 1.0  # type: ignore[misc]

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RetrySettings(default_delay=-1.0)
        assert exc_info.value.setting_name == "default_delay"

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RetrySettings(default_retry_limit=-2)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="log_level"):
            RetrySettings(log_level="LOUD")

    def test_invalid_value_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            RetrySettings(default_retry_limit=-1)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        assert EnvSettingsLoader().load() == RetrySettings()

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETRY_DEFAULT_DELAY", "0.5")
        monkeypatch.setenv("RETRY_DEFAULT_RETRY_LIMIT", "5")
        monkeypatch.setenv("RETRY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RETRY_LOG_JSON", "false")
        s = EnvSettingsLoader().load()
        assert s.default_delay == 0.5
        assert s.default_retry_limit == 5
        assert s.log_level == "DEBUG"
        assert s.log_json is False

    def test_bool_truthy_values(self) -> None:
        for truthy in ("1", "true", "Yes", "ON"):
            s = EnvSettingsLoader({"RETRY_LOG_JSON": truthy}).load()
            assert s.log_json is True

    def test_explicit_mapping(self) -> None:
        s = EnvSettingsLoader({"RETRY_DEFAULT_RETRY_LIMIT": "0"}).load()
        assert s.default_retry_limit == 0

    def test_non_numeric_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"RETRY_DEFAULT_DELAY": "soon"}).load()
        assert exc_info.value.setting_name == "RETRY_DEFAULT_DELAY"

    def test_out_of_range_value(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"RETRY_DEFAULT_RETRY_LIMIT": "-1"}).load()


# ---------------------------------------------------------------------------
# DotenvSettingsLoader / load_settings
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("RETRY_DEFAULT_DELAY=0.25\nRETRY_DEFAULT_RETRY_LIMIT=4\n")
        s = DotenvSettingsLoader(str(env_file)).load()
        assert s.default_delay == 0.25
        assert s.default_retry_limit == 4

    def test_env_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("RETRY_DEFAULT_RETRY_LIMIT=4\n")
        monkeypatch.setenv("RETRY_DEFAULT_RETRY_LIMIT", "9")
        assert DotenvSettingsLoader(str(env_file)).load().default_retry_limit == 9

    def test_load_settings_with_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("RETRY_LOG_LEVEL=WARNING\n")
        assert load_settings(str(env_file)).log_level == "WARNING"

    def test_load_settings_plain_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETRY_DEFAULT_DELAY", "1.5")
        assert load_settings().default_delay == 1.5
