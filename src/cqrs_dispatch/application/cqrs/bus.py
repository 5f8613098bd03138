"""Application CQRS – HandlerDispatcher, the routing shared by both buses."""
from __future__ import annotations

from typing import Any, ClassVar

from cqrs_dispatch.application.cqrs.bindings import handler_id_for, resolve_binding
from cqrs_dispatch.application.cqrs.handler import HandlerResolver, is_handler
from cqrs_dispatch.kernel.errors import InvalidHandlerError
from cqrs_dispatch.observability.logging import get_logger

logger = get_logger(__name__)


class HandlerDispatcher:
    """Route a message to the one handler its type declares.

    Holds nothing but the resolver, so a single instance can be shared for
    the lifetime of the application. Handler exceptions propagate unchanged.
    """

    kind: ClassVar[str] = "Message"

    def __init__(self, resolve_handler: HandlerResolver) -> None:
        self._resolve_handler = resolve_handler

    def handle(self, message: Any) -> Any:
        message_type = type(message)
        handler_id = resolve_binding(message_type, kind=self.kind)
        handler = self._resolve_handler(handler_id)
        if not is_handler(handler):
            raise InvalidHandlerError(handler_id, "Handler", actual=type(handler))
        logger.debug(
            "cqrs.dispatch",
            kind=self.kind.lower(),
            message_type=handler_id_for(message_type),
            handler_id=handler_id,
        )
        return handler.handle(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(resolve_handler={self._resolve_handler!r})"


__all__ = ["HandlerDispatcher"]
