"""Config settings – 12-factor env-based configuration."""
from cqrs_dispatch.config.settings.base import Settings
from cqrs_dispatch.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from cqrs_dispatch.config.settings.logging import LoggingSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
