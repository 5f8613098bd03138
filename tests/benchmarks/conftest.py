"""conftest.py for benchmarks.

Provides message/handler fixtures shared by the dispatch benchmarks.
"""

from __future__ import annotations

import pytest

from cqrs_dispatch.application.cqrs import Command, HandlerRegistry, handled_by


class PlaceOrderHandler:
    def handle(self, command: PlaceOrder) -> str:
        return "ok"


@handled_by(PlaceOrderHandler)
class PlaceOrder(Command):
    """Minimal command used only in benchmarks."""


@pytest.fixture(scope="session")
def place_order() -> PlaceOrder:
    return PlaceOrder()


@pytest.fixture(scope="session")
def registry() -> HandlerRegistry:
    return HandlerRegistry().register(PlaceOrderHandler)
