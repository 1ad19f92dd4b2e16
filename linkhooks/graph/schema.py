"""Canonical target/link schema.

Target types, link scopes and the well-known property names live here so that
the registry, the link annotator and the toolchain helpers agree on them.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Property that carries a target's ordered hook-file references.
HOOK_FILES_PROPERTY = "ON_LINKED_AS_DEPENDENCY_HOOK_FILES"
LINK_LIBRARIES_PROPERTY = "LINK_LIBRARIES"
INTERFACE_LINK_LIBRARIES_PROPERTY = "INTERFACE_LINK_LIBRARIES"
COMPILE_OPTIONS_PROPERTY = "COMPILE_OPTIONS"
COMPILE_DEFINITIONS_PROPERTY = "COMPILE_DEFINITIONS"
STATIC_LIBRARY_OPTIONS_PROPERTY = "STATIC_LIBRARY_OPTIONS"


class _NotFound:
    """Sentinel returned for properties that were never set."""

    _instance = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTFOUND"

    def __bool__(self) -> bool:
        return False


NOTFOUND = _NotFound()


class NodeType(str, Enum):
    """Node type constants for the link graph."""

    TARGET = "target"
    EXTERNAL = "external"


class TargetKind(str, Enum):
    """Whether a target produces (or consumes) compiled output."""

    COMPILED = "compiled"
    INTERFACE_ONLY = "interface-only"


class TargetType(str, Enum):
    """Target types understood by the registry."""

    EXECUTABLE = "executable"
    STATIC_LIBRARY = "static_library"
    SHARED_LIBRARY = "shared_library"
    MODULE_LIBRARY = "module_library"
    OBJECT_LIBRARY = "object_library"
    INTERFACE_LIBRARY = "interface_library"

    @property
    def kind(self) -> TargetKind:
        if self is TargetType.INTERFACE_LIBRARY:
            return TargetKind.INTERFACE_ONLY
        return TargetKind.COMPILED


class LinkScope(str, Enum):
    """Link visibility keywords."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    INTERFACE = "INTERFACE"

    @property
    def usage(self) -> bool:
        """True when the consumer itself links the item."""
        return self is not LinkScope.INTERFACE

    @property
    def exported(self) -> bool:
        """True when the item is re-exposed to the consumer's consumers."""
        return self is not LinkScope.PRIVATE


def parse_scope(token: Any) -> LinkScope | None:
    """Return the scope named by ``token``, or None when it is not a keyword.

    Matching is exact and case-sensitive: ``"public"`` is a library name.
    """
    if isinstance(token, LinkScope):
        return token
    if isinstance(token, str):
        try:
            return LinkScope(token)
        except ValueError:
            return None
    return None


class LinkEdge(BaseModel):
    """A recorded link relationship between a consumer and a link item."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    consumer: Annotated[str, Field(..., description="Consuming target name")]
    item: Annotated[str, Field(..., description="Target or external library name")]
    scope: Annotated[LinkScope, Field(default=LinkScope.PUBLIC)]

    @field_validator("consumer", "item")
    @classmethod
    def _check_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Link endpoints must be non-empty strings")
        return value

    def to_backend_attrs(self) -> Dict[str, Any]:
        """Convert this edge into a backend attribute mapping."""
        return {"scope": self.scope.value}
