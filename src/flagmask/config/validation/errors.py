"""Config validation errors.

Each error names the setting it is about in ``detail["setting"]`` so a log
line points straight at the variable to fix.
"""
from __future__ import annotations

from typing import Any

from flagmask.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no variable in the environment or ``.env``."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is not set in the environment or .env file",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value is present but cannot be coerced or fails ``_validate``."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Setting '{setting_name}' rejected value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
