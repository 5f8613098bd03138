"""Application CQRS – Query, QueryHandler, QueryBus."""
from __future__ import annotations

import abc
from typing import Generic, TypeVar

from cqrs_dispatch.application.cqrs.bus import HandlerDispatcher

Q = TypeVar("Q", bound="Query")
R = TypeVar("R")


class Query:
    """Marker base for queries (read-only intent)."""


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Handle a single query type and return a result."""

    @abc.abstractmethod
    def handle(self, query: Q) -> R: ...


class QueryBus(HandlerDispatcher):
    """Dispatches a query to its bound handler and returns the result as-is."""

    kind = "Query"


__all__ = ["Query", "QueryBus", "QueryHandler"]
