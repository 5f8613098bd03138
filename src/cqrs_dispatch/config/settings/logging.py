"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging

from cqrs_dispatch.config.settings.base import Settings
from cqrs_dispatch.config.validation.errors import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging options read from ``CQRS_LOG_LEVEL`` and ``CQRS_LOG_JSON``."""

    _prefix = "CQRS"

    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["LoggingSettings"]
