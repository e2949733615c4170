"""Config – RetrySettings and the env / dotenv loaders that populate it.

Environment variables use the ``RETRY_`` prefix::

    RETRY_DEFAULT_DELAY=0.5
    RETRY_DEFAULT_RETRY_LIMIT=5
    RETRY_LOG_LEVEL=DEBUG
    RETRY_LOG_JSON=false
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, ClassVar

from retry_executor.config.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass(frozen=True)
class RetrySettings:
    """Process-level defaults for the built-in policy catalog and logging."""

    _prefix: ClassVar[str] = "RETRY"

    default_delay: float = 2.0
    default_retry_limit: int = 3
    log_level: str = "INFO"
    log_json: bool = True

    def __post_init__(self) -> None:
        if self.default_delay < 0:
            raise InvalidSettingValueError("default_delay", self.default_delay, "must be >= 0")
        if self.default_retry_limit < 0:
            raise InvalidSettingValueError("default_retry_limit", self.default_retry_limit, "must be >= 0")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )


class SettingsLoader(abc.ABC):
    """Port: load :class:`RetrySettings` from an external source."""

    @abc.abstractmethod
    def load(self) -> RetrySettings: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from ``RETRY_*`` OS environment variables."""

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self) -> RetrySettings:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(RetrySettings):
            env_key = f"{RetrySettings._prefix}_{field.name}".upper()
            raw = environ.get(env_key)
            if raw is not None:
                kwargs[field.name] = self._coerce(env_key, raw, field.type)
        return RetrySettings(**kwargs)

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        try:
            if type_hint in (bool, "bool"):
                return value.strip().lower() in ("1", "true", "yes", "on")
            if type_hint in (int, "int"):
                return int(value)
            if type_hint in (float, "float"):
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, str(exc)) from exc
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self) -> RetrySettings:
        from dotenv import load_dotenv

        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load()


def load_settings(env_file: str | None = None) -> RetrySettings:
    """Return settings from *env_file* (via python-dotenv) or the plain environment."""
    loader: SettingsLoader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
    return loader.load()


__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "RetrySettings",
    "SettingsLoader",
    "load_settings",
]
