"""Public graph API surface."""

from linkhooks.graph.registry import Target, TargetRegistry
from linkhooks.graph.schema import (
    COMPILE_DEFINITIONS_PROPERTY,
    COMPILE_OPTIONS_PROPERTY,
    HOOK_FILES_PROPERTY,
    INTERFACE_LINK_LIBRARIES_PROPERTY,
    LINK_LIBRARIES_PROPERTY,
    NOTFOUND,
    STATIC_LIBRARY_OPTIONS_PROPERTY,
    LinkEdge,
    LinkScope,
    NodeType,
    TargetKind,
    TargetType,
    parse_scope,
)

__all__ = [
    "COMPILE_DEFINITIONS_PROPERTY",
    "COMPILE_OPTIONS_PROPERTY",
    "HOOK_FILES_PROPERTY",
    "INTERFACE_LINK_LIBRARIES_PROPERTY",
    "LINK_LIBRARIES_PROPERTY",
    "NOTFOUND",
    "STATIC_LIBRARY_OPTIONS_PROPERTY",
    "LinkEdge",
    "LinkScope",
    "NodeType",
    "Target",
    "TargetKind",
    "TargetRegistry",
    "TargetType",
    "parse_scope",
]
