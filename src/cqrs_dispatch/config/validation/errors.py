"""Config validation errors, raised while loading settings from the environment."""
from __future__ import annotations

from cqrs_dispatch.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable for a field without a default is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value is present but cannot be used for its field."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
