"""Application CQRS – ready-made handler resolvers.

Any ``Callable[[str], object]`` works as a resolver (a DI container's ``get``
method, a lambda). The two classes here cover the common wiring styles:

* :class:`ImportPathResolver` imports the class named by the identifier and
  instantiates it, so ``@handled_by(SomeHandler)`` works without any wiring.
* :class:`HandlerRegistry` maps identifiers to explicit factories, built once
  at startup::

      registry = (
          HandlerRegistry()
          .register(CreateOrderHandler, lambda: CreateOrderHandler(repo))
          .register(GetOrderHandler, lambda: GetOrderHandler(repo))
      )
      bus = CommandBus(registry)
"""
from __future__ import annotations

import importlib
from typing import Any, Callable

from cqrs_dispatch.application.cqrs.bindings import handler_id_for
from cqrs_dispatch.kernel.errors import HandlerNotFoundError
from cqrs_dispatch.observability.logging import get_logger

logger = get_logger(__name__)

HandlerFactory = Callable[[], Any]


class ImportPathResolver:
    """Resolve ``"pkg.module.Class"`` or ``"pkg.module:Class"`` by import.

    *factory* receives the imported class and returns the handler instance;
    the default calls it with no arguments.
    """

    def __init__(self, factory: Callable[[type], Any] | None = None) -> None:
        self._factory = factory or (lambda cls: cls())

    def __call__(self, handler_id: str) -> Any:
        return self._factory(self.load(handler_id))

    def load(self, handler_id: str) -> Any:
        """Import and return the object named by *handler_id*."""
        if ":" in handler_id:
            module_name, _, attr_path = handler_id.partition(":")
            return self._import(handler_id, module_name, attr_path.split("."))

        parts = handler_id.split(".")
        # longest importable module prefix wins; the rest are attributes
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                return self._import(handler_id, module_name, parts[split:])
            except HandlerNotFoundError as exc:
                if not isinstance(exc.cause, ModuleNotFoundError):
                    raise
        raise HandlerNotFoundError(handler_id, f"{handler_id!r} is not an importable path")

    @staticmethod
    def _import(handler_id: str, module_name: str, attrs: list[str]) -> Any:
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # a missing dependency inside an existing module is not ours to hide
            if exc.name is None or not (module_name == exc.name or module_name.startswith(f"{exc.name}.")):
                raise
            raise HandlerNotFoundError(handler_id, cause=exc) from exc
        try:
            for attr in attrs:
                target = getattr(target, attr)
        except AttributeError as exc:
            raise HandlerNotFoundError(
                handler_id, f"Module {module_name!r} has no attribute path {'.'.join(attrs)!r}", cause=exc
            ) from exc
        return target


class HandlerRegistry:
    """Explicit identifier → factory mapping, callable as a resolver.

    Every resolve calls the factory again; caching is the factory's business.
    """

    def __init__(self) -> None:
        self._factories: dict[str, HandlerFactory] = {}

    def register(self, handler: str | type, factory: HandlerFactory | None = None) -> HandlerRegistry:
        """Register *factory* for *handler* and return the registry.

        When *factory* is omitted, *handler* must be a class and is called
        with no arguments.
        """
        handler_id = handler_id_for(handler)
        if factory is None:
            if isinstance(handler, str):
                raise TypeError(f"A factory is required for string identifier {handler!r}")
            factory = handler
        if handler_id in self._factories:
            logger.warning("cqrs.handler_replaced", handler_id=handler_id)
        self._factories[handler_id] = factory
        return self

    def __call__(self, handler_id: str) -> Any:
        factory = self._factories.get(handler_id)
        if factory is None:
            raise HandlerNotFoundError(handler_id, f"No handler registered for {handler_id!r}")
        return factory()

    def __contains__(self, handler: object) -> bool:
        if not isinstance(handler, (str, type)):
            return False
        return handler_id_for(handler) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


__all__ = ["HandlerFactory", "HandlerRegistry", "ImportPathResolver"]
