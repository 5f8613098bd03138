"""Application – use-case dispatch building blocks (framework-agnostic)."""

from cqrs_dispatch.application.cqrs import (
    Command,
    CommandBus,
    CommandHandler,
    Handler,
    HandlerRegistry,
    ImportPathResolver,
    Query,
    QueryBus,
    QueryHandler,
    handled_by,
)

__all__ = [
    "Command",
    "CommandBus",
    "CommandHandler",
    "Handler",
    "HandlerRegistry",
    "ImportPathResolver",
    "Query",
    "QueryBus",
    "QueryHandler",
    "handled_by",
]
