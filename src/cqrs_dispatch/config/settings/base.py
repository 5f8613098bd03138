"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass base for settings read from ``<PREFIX>_<FIELD>`` variables."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Return the environment variable that feeds *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["Settings"]
