"""Application CQRS – Command, CommandHandler, CommandBus."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from cqrs_dispatch.application.cqrs.bus import HandlerDispatcher

C = TypeVar("C", bound="Command")


class Command:
    """Marker base for commands (intent to change state)."""


class CommandHandler(abc.ABC, Generic[C]):
    """Handle a single command type."""

    @abc.abstractmethod
    def handle(self, command: C) -> Any: ...


class CommandBus(HandlerDispatcher):
    """Dispatches a command to the handler bound by ``@handled_by``.

    Usage::

        bus = CommandBus(container.get)
        bus.handle(CreateOrder(item="widget"))
    """

    kind = "Command"


__all__ = ["Command", "CommandBus", "CommandHandler"]
