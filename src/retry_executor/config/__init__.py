"""Config – 12-factor retry settings and loaders."""

from retry_executor.config.errors import ConfigError, InvalidSettingValueError
from retry_executor.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RetrySettings,
    SettingsLoader,
    load_settings,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "RetrySettings",
    "SettingsLoader",
    "load_settings",
]
