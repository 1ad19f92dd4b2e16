"""Tests for the configuration event bus."""

from __future__ import annotations

from linkhooks.runtime.eventbus import Event, EventBus, EventType


def test_publish_reaches_subscribers_in_order() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(EventType.LINK_ADDED, lambda e: seen.append("first"))
    bus.subscribe(EventType.LINK_ADDED, lambda e: seen.append("second"))
    bus.subscribe(EventType.TARGET_DECLARED, lambda e: seen.append("other"))

    bus.publish(Event(EventType.LINK_ADDED, source="test"))

    assert seen == ["first", "second"]


def test_failing_observer_does_not_stop_others() -> None:
    bus = EventBus()
    seen: list[str] = []

    def _broken(event: Event) -> None:
        raise RuntimeError("observer bug")

    bus.subscribe(EventType.HOOK_INVOKED, _broken)
    bus.subscribe(EventType.HOOK_INVOKED, lambda e: seen.append(e.source))

    bus.publish(Event(EventType.HOOK_INVOKED, source="annotator"))

    assert seen == ["annotator"]


def test_catch_all_handlers_run_after_specific_ones() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe_all(lambda e: seen.append(f"all:{e.event_type.name}"))
    bus.subscribe(EventType.LINK_ADDED, lambda e: seen.append("link"))

    bus.publish(Event(EventType.LINK_ADDED, source="test"))
    bus.publish(Event(EventType.HOOK_INVOKED, source="test"))

    assert seen == ["link", "all:LINK_ADDED", "all:HOOK_INVOKED"]


def test_has_subscribers() -> None:
    bus = EventBus()
    assert not bus.has_subscribers(EventType.PROPERTY_SET)

    bus.subscribe(EventType.PROPERTY_SET, lambda e: None)
    assert bus.has_subscribers(EventType.PROPERTY_SET)
    assert not bus.has_subscribers(EventType.LINK_ADDED)

    bus.subscribe_all(lambda e: None)
    assert bus.has_subscribers(EventType.LINK_ADDED)
