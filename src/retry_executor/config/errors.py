"""Config errors raised while building :class:`RetrySettings`."""
from __future__ import annotations

from retry_executor.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Retry configuration could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``RETRY_*`` value failed coercion or is out of range.

    ``setting_name`` is the dataclass field name when raised by
    ``RetrySettings`` and the environment key when raised during coercion.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
