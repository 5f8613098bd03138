"""Dispatch errors: raised while routing a command or query to its handler.

Failures raised by a handler's own ``handle`` never appear here: the buses
let them propagate untouched.
"""

from __future__ import annotations

from typing import Any

from cqrs_dispatch.kernel.errors.application import ApplicationError


class DispatchError(ApplicationError):
    """A message could not be routed to a handler."""

    default_code = "dispatch_error"


class HandlerBindingError(DispatchError):
    """The message type does not declare exactly one handler binding.

    ``NoBindingFoundError`` and ``AmbiguousBindingError`` share this base and
    the same "must have exactly one" wording; catch this class to handle both.
    """

    default_code = "invalid_handler_binding"

    def __init__(
        self,
        message_type: str,
        bindings: tuple[str, ...] = (),
        *,
        kind: str = "Message",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{kind} {message_type} must have exactly one @handled_by binding, "
            f"found {len(bindings)}.",
            detail={"message_type": message_type, "bindings": list(bindings)},
            **kwargs,
        )
        self.message_type = message_type
        self.bindings = bindings
        self.kind = kind


class NoBindingFoundError(HandlerBindingError):
    """The message type declares no handler binding."""

    default_code = "no_binding_found"


class AmbiguousBindingError(HandlerBindingError):
    """The message type declares more than one handler binding."""

    default_code = "ambiguous_binding"


class InvalidHandlerError(DispatchError):
    """The resolver returned an object that does not satisfy ``Handler``."""

    default_code = "invalid_handler"

    def __init__(
        self,
        handler_id: str,
        required: str,
        *,
        actual: type | None = None,
        **kwargs: Any,
    ) -> None:
        actual_name = actual.__qualname__ if actual is not None else "object"
        super().__init__(
            f"Handler {handler_id} resolved to {actual_name}, which must implement "
            f"{required} (a callable handle(message) method).",
            detail={"handler_id": handler_id, "required": required},
            **kwargs,
        )
        self.handler_id = handler_id
        self.required = required


class HandlerNotFoundError(DispatchError):
    """A resolver has no handler for the requested identifier."""

    default_code = "handler_not_found"

    def __init__(self, handler_id: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"No handler could be resolved for {handler_id!r}",
            detail={"handler_id": handler_id},
            **kwargs,
        )
        self.handler_id = handler_id


__all__ = [
    "AmbiguousBindingError",
    "DispatchError",
    "HandlerBindingError",
    "HandlerNotFoundError",
    "InvalidHandlerError",
    "NoBindingFoundError",
]
