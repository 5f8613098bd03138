"""Observability – structlog configuration and logger helper."""
from cqrs_dispatch.observability.logging.factory import JsonLoggerFactory
from cqrs_dispatch.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
