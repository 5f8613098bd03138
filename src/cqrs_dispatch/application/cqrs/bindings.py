"""Application CQRS – @handled_by declarations and binding lookup.

A message class names the one handler allowed to process it::

    @handled_by(CreateOrderHandler)
    @dataclasses.dataclass(frozen=True)
    class CreateOrder(Command):
        item: str

Declarations live on the decorated class only; subclasses do not inherit
them. Nothing is validated until a message of that type is dispatched.
"""
from __future__ import annotations

from typing import Callable, TypeVar

from cqrs_dispatch.kernel.errors import AmbiguousBindingError, NoBindingFoundError

T = TypeVar("T", bound=type)

_BINDINGS_ATTR = "__handled_by__"


def handler_id_for(target: str | type) -> str:
    """Return the handler identifier for *target*.

    Strings are opaque and returned as-is; classes map to
    ``"<module>.<qualname>"``.
    """
    if isinstance(target, str):
        return target
    return f"{target.__module__}.{target.__qualname__}"


def handled_by(handler: str | type) -> Callable[[T], T]:
    """Class decorator declaring the handler bound to a message type.

    Stacking the decorator declares several bindings, in source order. Such a
    message type is rejected at dispatch time with
    :class:`~cqrs_dispatch.kernel.errors.AmbiguousBindingError`.
    """
    handler_id = handler_id_for(handler)

    def decorator(message_cls: T) -> T:
        own = message_cls.__dict__.get(_BINDINGS_ATTR, ())
        # decorators apply bottom-up; prepend to keep source order
        setattr(message_cls, _BINDINGS_ATTR, (handler_id, *own))
        return message_cls

    return decorator


def declared_bindings(message_type: type) -> tuple[str, ...]:
    """Return the handler identifiers declared on *message_type* itself."""
    return tuple(message_type.__dict__.get(_BINDINGS_ATTR, ()))


def resolve_binding(message_type: type, kind: str = "Message") -> str:
    """Return the single handler identifier declared on *message_type*.

    Raises
    ------
    NoBindingFoundError
        When the type declares no binding.
    AmbiguousBindingError
        When the type declares more than one binding.
    """
    bindings = declared_bindings(message_type)
    if len(bindings) == 1:
        return bindings[0]
    name = handler_id_for(message_type)
    if not bindings:
        raise NoBindingFoundError(name, bindings, kind=kind)
    raise AmbiguousBindingError(name, bindings, kind=kind)


__all__ = ["declared_bindings", "handled_by", "handler_id_for", "resolve_binding"]
