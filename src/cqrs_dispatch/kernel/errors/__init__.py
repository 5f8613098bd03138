"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError         (application.py)
        └── DispatchError        (dispatch.py)
            ├── HandlerBindingError
            │   ├── NoBindingFoundError
            │   └── AmbiguousBindingError
            ├── InvalidHandlerError
            └── HandlerNotFoundError
"""

from cqrs_dispatch.kernel.errors.application import ApplicationError
from cqrs_dispatch.kernel.errors.base import BaseError
from cqrs_dispatch.kernel.errors.dispatch import (
    AmbiguousBindingError,
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
