"""Unit tests for @handled_by declarations and binding lookup."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cqrs_dispatch.application.cqrs import (
    Command,
    declared_bindings,
    handled_by,
    handler_id_for,
    resolve_binding,
)
from cqrs_dispatch.kernel.errors import (
    AmbiguousBindingError,
    HandlerBindingError,
    NoBindingFoundError,
)


class ShipOrderHandler:
    def handle(self, command: ShipOrder) -> None:
        return None


@handled_by(ShipOrderHandler)
@dataclasses.dataclass(frozen=True)
class ShipOrder(Command):
    order_id: str


@dataclasses.dataclass(frozen=True)
class ExpressShipOrder(ShipOrder):
    pass


@handled_by("handlers.First")
@handled_by("handlers.Second")
class TwiceBound:
    pass


class Unbound:
    pass


class TestHandlerIdFor:
    def test_string_is_returned_verbatim(self) -> None:
        assert handler_id_for("Some.Namespace.SomeHandler") == "Some.Namespace.SomeHandler"

    def test_class_maps_to_module_and_qualname(self) -> None:
        assert handler_id_for(ShipOrderHandler) == f"{__name__}.ShipOrderHandler"


class TestHandledBy:
    def test_returns_class_unchanged(self) -> None:
        assert ShipOrder.__name__ == "ShipOrder"
        assert ShipOrder("o-1").order_id == "o-1"

    def test_stores_handler_identifier(self) -> None:
        assert declared_bindings(ShipOrder) == (handler_id_for(ShipOrderHandler),)

    def test_stacked_declarations_keep_source_order(self) -> None:
        assert declared_bindings(TwiceBound) == ("handlers.First", "handlers.Second")

    def test_undecorated_class_has_no_bindings(self) -> None:
        assert declared_bindings(Unbound) == ()

    def test_bindings_are_not_inherited(self) -> None:
        assert declared_bindings(ExpressShipOrder) == ()

    def test_decorating_subclass_does_not_touch_parent(self) -> None:
        @handled_by("handlers.Child")
        class Child(ShipOrder):
            pass

        assert declared_bindings(Child) == ("handlers.Child",)
        assert declared_bindings(ShipOrder) == (handler_id_for(ShipOrderHandler),)

    def test_no_validation_at_declaration_time(self) -> None:
        @handled_by("a.One")
        @handled_by("a.Two")
        @handled_by("a.Three")
        class Overbound:
            pass

        assert len(declared_bindings(Overbound)) == 3


class TestResolveBinding:
    def test_single_binding_is_returned(self) -> None:
        assert resolve_binding(ShipOrder) == handler_id_for(ShipOrderHandler)

    def test_missing_binding_raises(self) -> None:
        with pytest.raises(NoBindingFoundError, match="must have exactly one") as exc_info:
            resolve_binding(Unbound, kind="Command")
        assert "Unbound" in exc_info.value.message
        assert exc_info.value.message.startswith("Command ")

    def test_ambiguous_binding_raises(self) -> None:
        with pytest.raises(AmbiguousBindingError, match="must have exactly one") as exc_info:
            resolve_binding(TwiceBound, kind="Query")
        assert "TwiceBound" in exc_info.value.message
        assert exc_info.value.bindings == ("handlers.First", "handlers.Second")

    def test_inherited_declaration_is_not_used(self) -> None:
        with pytest.raises(NoBindingFoundError, match="ExpressShipOrder"):
            resolve_binding(ExpressShipOrder)

    def test_both_failures_share_the_family(self) -> None:
        for message_type in (Unbound, TwiceBound):
            with pytest.raises(HandlerBindingError):
                resolve_binding(message_type)

    @given(st.text(min_size=1))
    def test_any_single_identifier_round_trips(self, identifier: str) -> None:
        @handled_by(identifier)
        class Message:
            pass

        assert resolve_binding(Message) == identifier

    @given(st.lists(st.text(min_size=1), min_size=2, max_size=5))
    def test_two_or_more_declarations_are_ambiguous(self, identifiers: list[str]) -> None:
        class Message:
            pass

        for identifier in reversed(identifiers):
            Message = handled_by(identifier)(Message)

        with pytest.raises(AmbiguousBindingError):
            resolve_binding(Message)
        assert declared_bindings(Message) == tuple(identifiers)
