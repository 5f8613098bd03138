"""Config – 12-factor settings and loaders."""

from cqrs_dispatch.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)
from cqrs_dispatch.config.validation import (
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
