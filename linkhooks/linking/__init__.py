"""Dependency linking with on-linked hook files."""

from linkhooks.linking.annotator import (
    LinkItem,
    iter_link_items,
    link_dependencies,
    link_with_hooks,
)
from linkhooks.linking.hook_files import hook_files, propagate_hooks, register_hook
from linkhooks.linking.loader import HOOK_CALLBACK_NAME, HookCallback, HookLoader

__all__ = [
    "HOOK_CALLBACK_NAME",
    "HookCallback",
    "HookLoader",
    "LinkItem",
    "hook_files",
    "iter_link_items",
    "link_dependencies",
    "link_with_hooks",
    "propagate_hooks",
    "register_hook",
]
