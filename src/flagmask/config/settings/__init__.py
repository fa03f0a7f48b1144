"""Config settings – environment-based configuration."""
from flagmask.config.settings.base import Settings
from flagmask.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from flagmask.config.settings.logs import LoggingSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
