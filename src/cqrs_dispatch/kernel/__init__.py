"""Kernel – framework-agnostic building blocks."""

from cqrs_dispatch.kernel.errors import (
    AmbiguousBindingError,
    ApplicationError,
    BaseError,
    DispatchError,
    HandlerBindingError,
    HandlerNotFoundError,
    InvalidHandlerError,
    NoBindingFoundError,
)

__all__ = [
    "AmbiguousBindingError",
    "ApplicationError",
    "BaseError",
    "DispatchError",
    "HandlerBindingError",
    "HandlerNotFoundError",
    "InvalidHandlerError",
    "NoBindingFoundError",
]
