"""Config – settings dataclasses, loaders and validation errors."""

from flagmask.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)
from flagmask.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
