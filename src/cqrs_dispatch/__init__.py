"""
cqrs_dispatch – Command and query buses routed by declared handler bindings.

Import path convention::

    from cqrs_dispatch.application.cqrs import CommandBus, QueryBus, handled_by
    from cqrs_dispatch.kernel.errors import NoBindingFoundError
    from cqrs_dispatch.observability.logging import get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
