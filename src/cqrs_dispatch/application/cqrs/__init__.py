"""Application CQRS – Commands, Queries, handler bindings, buses."""
from cqrs_dispatch.application.cqrs.bindings import (
    declared_bindings,
    handled_by,
    handler_id_for,
    resolve_binding,
)
from cqrs_dispatch.application.cqrs.bus import HandlerDispatcher
from cqrs_dispatch.application.cqrs.commands import Command, CommandBus, CommandHandler
from cqrs_dispatch.application.cqrs.handler import Handler, HandlerResolver, is_handler
from cqrs_dispatch.application.cqrs.queries import Query, QueryBus, QueryHandler
from cqrs_dispatch.application.cqrs.resolvers import HandlerFactory, HandlerRegistry, ImportPathResolver

__all__ = [
    "Command", "CommandBus", "CommandHandler",
    "Handler", "HandlerDispatcher", "HandlerFactory", "HandlerRegistry", "HandlerResolver",
    "ImportPathResolver",
    "Query", "QueryBus", "QueryHandler",
    "declared_bindings",
    "handled_by",
    "handler_id_for",
    "is_handler",
    "resolve_binding",
]
