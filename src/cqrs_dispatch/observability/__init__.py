"""Observability – structured logging for the dispatch layer."""
from cqrs_dispatch.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
