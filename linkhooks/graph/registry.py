"""Target registry for a single configuration pass.

The registry is the explicit replacement for a build tool's global target
state: a property store keyed by target name plus the link graph between
targets and external libraries. Every operation receives the registry it acts
on; there is no process-wide instance.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import networkx as nx

from linkhooks.errors import DuplicateTargetError, InvalidLinkError, UnknownTargetError
from linkhooks.graph.schema import (
    COMPILE_DEFINITIONS_PROPERTY,
    COMPILE_OPTIONS_PROPERTY,
    HOOK_FILES_PROPERTY,
    INTERFACE_LINK_LIBRARIES_PROPERTY,
    LINK_LIBRARIES_PROPERTY,
    NOTFOUND,
    LinkEdge,
    LinkScope,
    NodeType,
    TargetKind,
    TargetType,
)
from linkhooks.runtime.eventbus import Event, EventBus, EventType

logger = logging.getLogger("linkhooks.graph.registry")


def _copy_value(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    return value


class TargetRegistry:
    """Property store and link graph for declared targets.

    Nodes of the underlying MultiDiGraph are either declared targets or
    external library names that were linked but never declared. Edges are
    link relationships annotated with their scope, kept in insertion order.
    """

    def __init__(self, eventbus: Optional[EventBus] = None, name: str = "default") -> None:
        self.name = name
        self.eventbus = eventbus
        self._graph = nx.MultiDiGraph(name=name)
        self._edge_seq = 0
        logger.debug("TargetRegistry initialized: %s", name)

    @property
    def native_graph(self) -> nx.MultiDiGraph:
        """Underlying NetworkX graph, for export and analysis."""
        return self._graph

    def publish(self, event_type: EventType, source: str = "registry", **data: Any) -> None:
        """Publish an event on the attached bus, if any."""
        if self.eventbus is not None and self.eventbus.has_subscribers(event_type):
            self.eventbus.publish(Event(event_type=event_type, source=source, data=data))

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def declare(
        self,
        name: str,
        target_type: Union[TargetType, str] = TargetType.STATIC_LIBRARY,
        properties: Optional[Dict[str, Any]] = None,
    ) -> "Target":
        """Declare a new target.

        Args:
            name: Unique target name.
            target_type: Target type (enum member or its string value).
            properties: Optional initial properties.

        Returns:
            Target: Handle bound to this registry.

        Raises:
            DuplicateTargetError: If ``name`` is already a declared target.
        """
        if not name:
            raise ValueError("Target name must be a non-empty string")
        if self.is_target(name):
            raise DuplicateTargetError(f"Target '{name}' is already declared")

        ttype = TargetType(target_type)
        props = {key: _copy_value(value) for key, value in (properties or {}).items()}
        if self._graph.has_node(name):
            # A previously linked external name becomes a real target.
            logger.debug("Promoting external library %s to target", name)
        self._graph.add_node(
            name,
            type=NodeType.TARGET.value,
            target_type=ttype.value,
            properties=props,
        )
        logger.debug("Declared target %s (type=%s)", name, ttype.value)
        self.publish(EventType.TARGET_DECLARED, target=name, target_type=ttype.value)
        return Target(self, name)

    def is_target(self, name: Any) -> bool:
        """Return True when ``name`` is a declared target."""
        if not isinstance(name, str) or not self._graph.has_node(name):
            return False
        return self._graph.nodes[name].get("type") == NodeType.TARGET.value

    def target(self, name: str, loader: Any = None) -> "Target":
        """Return a handle for a declared target.

        ``loader`` is the hook loader that links made through the handle use.
        """
        self._require_target(name)
        return Target(self, name, loader=loader)

    def targets(self) -> List[str]:
        """List declared target names in declaration order."""
        return [
            node for node, data in self._graph.nodes(data=True)
            if data.get("type") == NodeType.TARGET.value
        ]

    def target_type(self, name: str) -> TargetType:
        return TargetType(self._require_target(name)["target_type"])

    def kind(self, name: str) -> TargetKind:
        return self.target_type(name).kind

    def is_interface_only(self, name: str) -> bool:
        return self.kind(name) is TargetKind.INTERFACE_ONLY

    def _require_target(self, name: str) -> Dict[str, Any]:
        if not self.is_target(name):
            raise UnknownTargetError(f"Unknown target: {name}")
        return self._graph.nodes[name]

    # ------------------------------------------------------------------
    # Property store
    # ------------------------------------------------------------------

    def get_property(self, name: str, prop: str) -> Any:
        """Return a copy of a target property, or ``NOTFOUND`` when unset."""
        props = self._require_target(name)["properties"]
        if prop not in props:
            return NOTFOUND
        return _copy_value(props[prop])

    def set_property(self, name: str, prop: str, value: Any) -> None:
        """Set (replace) a target property."""
        props = self._require_target(name)["properties"]
        props[prop] = _copy_value(value)
        logger.debug("Set %s.%s = %r", name, prop, value)
        self.publish(EventType.PROPERTY_SET, target=name, property=prop)

    def append_property(self, name: str, prop: str, values: Iterable[Any]) -> None:
        """Append values to a list-valued property, creating it when unset."""
        current = self.get_property(name, prop)
        if current is NOTFOUND:
            current = []
        elif not isinstance(current, list):
            current = [current]
        current.extend(values)
        self.set_property(name, prop, current)

    # ------------------------------------------------------------------
    # Native link primitive
    # ------------------------------------------------------------------

    def link(self, consumer: str, scope: Union[LinkScope, str], item: str) -> LinkEdge:
        """Link ``item`` to ``consumer`` with the given scope.

        This is the plain link operation with no hook handling. Usage scopes
        (PUBLIC, PRIVATE) append to ``LINK_LIBRARIES``; exported scopes
        (PUBLIC, INTERFACE) append to ``INTERFACE_LINK_LIBRARIES``.

        Raises:
            UnknownTargetError: If ``consumer`` is not declared.
            InvalidLinkError: If an interface-only consumer is linked with a
                scope other than INTERFACE.
        """
        scope = LinkScope(scope)
        self._require_target(consumer)
        if self.is_interface_only(consumer) and scope is not LinkScope.INTERFACE:
            raise InvalidLinkError(
                f"INTERFACE library '{consumer}' can only link with the INTERFACE scope "
                f"(got {scope.value} {item})"
            )

        edge = LinkEdge(consumer=consumer, item=item, scope=scope)
        if not self._graph.has_node(item):
            self._graph.add_node(item, type=NodeType.EXTERNAL.value)
        self._graph.add_edge(consumer, item, seq=self._edge_seq, **edge.to_backend_attrs())
        self._edge_seq += 1

        if scope.usage:
            self.append_property(consumer, LINK_LIBRARIES_PROPERTY, [item])
        if scope.exported:
            self.append_property(consumer, INTERFACE_LINK_LIBRARIES_PROPERTY, [item])

        logger.debug("Linked %s -> %s (%s)", consumer, item, scope.value)
        self.publish(EventType.LINK_ADDED, consumer=consumer, item=item, scope=scope.value)
        return edge

    def links(self, consumer: str) -> List[LinkEdge]:
        """Return the link edges of ``consumer`` in the order they were added."""
        self._require_target(consumer)
        edges = sorted(
            self._graph.out_edges(consumer, data=True), key=lambda edge: edge[2]["seq"]
        )
        return [
            LinkEdge(consumer=consumer, item=item, scope=LinkScope(data["scope"]))
            for _, item, data in edges
        ]

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()


class Target:
    """Handle for one declared target.

    Hook callbacks receive a ``Target`` for the consumer, so everything a hook
    is expected to do to its consumer is reachable from here. The handle keeps
    the hook loader of the link that produced it, so links made from inside a
    hook resolve relative hook files against the same base directory.
    """

    def __init__(self, registry: TargetRegistry, name: str, loader: Any = None) -> None:
        self.registry = registry
        self.name = name
        self.loader = loader

    def __repr__(self) -> str:
        return f"Target({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Target):
            return NotImplemented
        return self.registry is other.registry and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.registry), self.name))

    @property
    def type(self) -> TargetType:
        return self.registry.target_type(self.name)

    @property
    def kind(self) -> TargetKind:
        return self.registry.kind(self.name)

    @property
    def hook_files(self) -> List[str]:
        """Registered hook-file references, empty when none."""
        value = self.registry.get_property(self.name, HOOK_FILES_PROPERTY)
        return [] if value is NOTFOUND else value

    def get_property(self, prop: str) -> Any:
        return self.registry.get_property(self.name, prop)

    def set_property(self, prop: str, value: Any) -> None:
        self.registry.set_property(self.name, prop, value)

    def append_property(self, prop: str, *values: Any) -> None:
        self.registry.append_property(self.name, prop, values)

    def add_compile_definitions(self, *definitions: str) -> None:
        self.registry.append_property(self.name, COMPILE_DEFINITIONS_PROPERTY, definitions)

    def add_compile_options(self, *options: str) -> None:
        self.registry.append_property(self.name, COMPILE_OPTIONS_PROPERTY, options)

    def link(self, *args: Any) -> None:
        """Link dependencies to this target, running their hooks."""
        from linkhooks.linking.annotator import link_with_hooks

        link_with_hooks(self.registry, self.name, *args, loader=self.loader)

    def register_hook(self, hook_file: str) -> None:
        from linkhooks.linking.hook_files import register_hook

        register_hook(self.registry, self.name, hook_file)

    def propagate_hooks_from(self, library: str) -> None:
        from linkhooks.linking.hook_files import propagate_hooks

        propagate_hooks(self.registry, library, self.name)
