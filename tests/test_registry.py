"""Tests for the target registry and its native link primitive."""

from __future__ import annotations

import pytest

from linkhooks.errors import DuplicateTargetError, InvalidLinkError, UnknownTargetError
from linkhooks.graph import (
    INTERFACE_LINK_LIBRARIES_PROPERTY,
    LINK_LIBRARIES_PROPERTY,
    NOTFOUND,
    LinkScope,
    NodeType,
    TargetKind,
    TargetRegistry,
    TargetType,
)
from linkhooks.runtime.eventbus import EventBus, EventType


def test_declare_and_query_kind(registry: TargetRegistry) -> None:
    """Declared targets expose their type and derived kind."""
    registry.declare("core", TargetType.STATIC_LIBRARY)
    registry.declare("headers", "interface_library")

    assert registry.targets() == ["core", "headers"]
    assert registry.kind("core") is TargetKind.COMPILED
    assert registry.is_interface_only("headers")
    assert registry.target("headers").kind is TargetKind.INTERFACE_ONLY


def test_declare_twice_fails(registry: TargetRegistry) -> None:
    registry.declare("core")
    with pytest.raises(DuplicateTargetError):
        registry.declare("core")


def test_unset_property_returns_notfound(registry: TargetRegistry) -> None:
    """Unset properties return the NOTFOUND sentinel, which is falsy."""
    registry.declare("core")

    value = registry.get_property("core", "WHATEVER")

    assert value is NOTFOUND
    assert not value
    assert repr(value) == "NOTFOUND"


def test_get_property_returns_copy(registry: TargetRegistry) -> None:
    """Mutating a returned list must not change the stored property."""
    registry.declare("core")
    registry.set_property("core", "LIST", ["a"])

    value = registry.get_property("core", "LIST")
    value.append("b")

    assert registry.get_property("core", "LIST") == ["a"]


def test_append_property_creates_and_extends(registry: TargetRegistry) -> None:
    registry.declare("core")
    registry.append_property("core", "OPTS", ["-O2"])
    registry.append_property("core", "OPTS", ["-g", "-fPIC"])

    assert registry.get_property("core", "OPTS") == ["-O2", "-g", "-fPIC"]


def test_unknown_target_property_access_fails(registry: TargetRegistry) -> None:
    with pytest.raises(UnknownTargetError):
        registry.get_property("ghost", "X")


def test_link_scopes_fill_link_properties(registry: TargetRegistry) -> None:
    """PUBLIC fills both lists, PRIVATE only usage, INTERFACE only exported."""
    registry.declare("app", TargetType.EXECUTABLE)
    registry.declare("pub")
    registry.declare("priv")
    registry.declare("iface")

    registry.link("app", LinkScope.PUBLIC, "pub")
    registry.link("app", "PRIVATE", "priv")
    registry.link("app", LinkScope.INTERFACE, "iface")

    assert registry.get_property("app", LINK_LIBRARIES_PROPERTY) == ["pub", "priv"]
    assert registry.get_property("app", INTERFACE_LINK_LIBRARIES_PROPERTY) == ["pub", "iface"]
    assert [(e.item, e.scope) for e in registry.links("app")] == [
        ("pub", LinkScope.PUBLIC),
        ("priv", LinkScope.PRIVATE),
        ("iface", LinkScope.INTERFACE),
    ]


def test_links_keep_insertion_order_across_repeats(registry: TargetRegistry) -> None:
    registry.declare("app", TargetType.EXECUTABLE)
    registry.link("app", LinkScope.PUBLIC, "a")
    registry.link("app", LinkScope.PUBLIC, "b")
    registry.link("app", LinkScope.PRIVATE, "a")

    assert [e.item for e in registry.links("app")] == ["a", "b", "a"]


def test_link_external_library_is_not_a_target(registry: TargetRegistry) -> None:
    registry.declare("app", TargetType.EXECUTABLE)
    registry.link("app", LinkScope.PRIVATE, "pthread")

    assert not registry.is_target("pthread")
    assert registry.native_graph.nodes["pthread"]["type"] == NodeType.EXTERNAL.value


def test_external_library_can_be_promoted_to_target(registry: TargetRegistry) -> None:
    registry.declare("app", TargetType.EXECUTABLE)
    registry.link("app", LinkScope.PRIVATE, "late")

    registry.declare("late")

    assert registry.is_target("late")
    assert [e.item for e in registry.links("app")] == ["late"]


def test_interface_consumer_requires_interface_scope(registry: TargetRegistry) -> None:
    registry.declare("headers", TargetType.INTERFACE_LIBRARY)
    registry.declare("core")

    with pytest.raises(InvalidLinkError):
        registry.link("headers", LinkScope.PUBLIC, "core")

    registry.link("headers", LinkScope.INTERFACE, "core")
    assert registry.get_property("headers", INTERFACE_LINK_LIBRARIES_PROPERTY) == ["core"]
    assert registry.get_property("headers", LINK_LIBRARIES_PROPERTY) is NOTFOUND


def test_link_from_undeclared_consumer_fails(registry: TargetRegistry) -> None:
    with pytest.raises(UnknownTargetError):
        registry.link("ghost", LinkScope.PUBLIC, "m")


def test_registry_publishes_events() -> None:
    """Declarations and links are published on the attached bus."""
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(EventType.TARGET_DECLARED, lambda e: seen.append(f"declare:{e.data['target']}"))
    bus.subscribe(EventType.LINK_ADDED, lambda e: seen.append(f"link:{e.data['item']}"))

    registry = TargetRegistry(eventbus=bus)
    registry.declare("app", TargetType.EXECUTABLE)
    registry.link("app", LinkScope.PUBLIC, "m")

    assert seen == ["declare:app", "link:m"]


def test_registries_are_independent() -> None:
    """There is no shared global state between registries."""
    first = TargetRegistry()
    second = TargetRegistry()
    first.declare("core")

    assert first.is_target("core")
    assert not second.is_target("core")


def test_target_handle_helpers(registry: TargetRegistry) -> None:
    core = registry.declare("core")
    core.add_compile_definitions("USE_CORE=1")
    core.add_compile_options("-Wall")
    core.set_property("MARK", True)

    assert core.get_property("COMPILE_DEFINITIONS") == ["USE_CORE=1"]
    assert core.get_property("COMPILE_OPTIONS") == ["-Wall"]
    assert core.get_property("MARK") is True
    assert core.hook_files == []
    assert core == registry.target("core")
