"""linkhooks: build-configuration helpers with on-linked-as-dependency hooks."""

from linkhooks.errors import ConfigurationError
from linkhooks.graph import NOTFOUND, LinkScope, Target, TargetRegistry, TargetType
from linkhooks.linking import (
    HookLoader,
    link_dependencies,
    link_with_hooks,
    propagate_hooks,
    register_hook,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "HookLoader",
    "LinkScope",
    "NOTFOUND",
    "Target",
    "TargetRegistry",
    "TargetType",
    "link_dependencies",
    "link_with_hooks",
    "propagate_hooks",
    "register_hook",
]
