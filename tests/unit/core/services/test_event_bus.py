from __future__ import annotations

"""
Unit tests for the typed EventBus.
"""

import pytest

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.domain.events import Command, LoadTree, NodeChanged, ToggleNode


def test_publish_delivers_by_type() -> None:
    """TC-01: Handlers receive only their own message class."""
    bus = EventBus()
    toggles, changes = [], []
    bus.subscribe(ToggleNode, toggles.append)
    bus.subscribe(NodeChanged, changes.append)

    delivered = bus.publish(ToggleNode("/docs"))

    assert delivered == 1
    assert toggles == [ToggleNode("/docs")]
    assert changes == []


def test_base_class_subscription_receives_subclasses() -> None:
    """TC-02: Subscribing to Command observes every command."""
    bus = EventBus()
    seen = []
    bus.subscribe(Command, seen.append)

    bus.publish(LoadTree())
    bus.publish(ToggleNode("/a"))
    bus.publish(NodeChanged("/a"))

    assert seen == [LoadTree(), ToggleNode("/a")]


def test_unsubscribe_stops_delivery() -> None:
    """TC-03: The returned callable removes the handler."""
    bus = EventBus()
    seen = []
    unsubscribe = bus.subscribe(LoadTree, seen.append)

    unsubscribe()
    unsubscribe()

    assert bus.publish(LoadTree()) == 0
    assert seen == []


def test_handlers_run_in_subscription_order() -> None:
    """TC-04: Delivery is synchronous and ordered."""
    bus = EventBus()
    order = []
    bus.subscribe(LoadTree, lambda _m: order.append("first"))
    bus.subscribe(LoadTree, lambda _m: order.append("second"))

    bus.publish(LoadTree())

    assert order == ["first", "second"]


def test_handler_errors_propagate() -> None:
    """TC-05: The bus does not hide handler failures."""
    bus = EventBus()

    def _fail(_msg):
        raise RuntimeError("handler failure")

    bus.subscribe(LoadTree, _fail)

    with pytest.raises(RuntimeError, match="handler failure"):
        bus.publish(LoadTree())
