"""Application CQRS – Handler contract and HandlerResolver type."""
from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Handler(Protocol):
    """Contract every resolved handler instance must satisfy."""

    def handle(self, message: Any) -> Any: ...


HandlerResolver = Callable[[str], Any]
"""Maps a handler identifier to a live handler instance."""


def is_handler(candidate: object) -> bool:
    """Return ``True`` when *candidate* is an instance exposing a callable ``handle``."""
    if isinstance(candidate, type):
        return False
    return isinstance(candidate, Handler) and callable(getattr(candidate, "handle"))


__all__ = ["Handler", "HandlerResolver", "is_handler"]
