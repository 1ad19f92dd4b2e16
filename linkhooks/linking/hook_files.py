"""Registration and propagation of hook-file references on targets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from linkhooks.errors import ConfigurationError
from linkhooks.graph.registry import TargetRegistry
from linkhooks.graph.schema import HOOK_FILES_PROPERTY, NOTFOUND
from linkhooks.runtime.eventbus import EventType

logger = logging.getLogger("linkhooks.linking.hook_files")


def hook_files(registry: TargetRegistry, target: str) -> List[str]:
    """Return ``target``'s hook-file references (empty when none)."""
    value = registry.get_property(target, HOOK_FILES_PROPERTY)
    if value is NOTFOUND:
        return []
    return list(value)


def register_hook(
    registry: TargetRegistry, target: str, hook_file: Union[str, Path]
) -> None:
    """Attach a hook file to ``target``.

    Registration is explicit and repeatable: registering the same file twice
    lists it twice. Use :func:`propagate_hooks` for deduplicated merging.

    Raises:
        ConfigurationError: If ``target`` is interface-only.
    """
    if registry.is_interface_only(target):
        raise ConfigurationError(
            f"Cannot register hook file {hook_file} on INTERFACE library '{target}'"
        )
    reference = str(hook_file)
    registry.append_property(target, HOOK_FILES_PROPERTY, [reference])
    logger.debug("Registered hook file %s on %s", reference, target)
    registry.publish(
        EventType.HOOK_REGISTERED, source="hook_files", target=target, hook_file=reference
    )


def propagate_hooks(registry: TargetRegistry, library: str, target: str) -> List[str]:
    """Copy ``library``'s hook-file references onto ``target`` without duplicates.

    New references are appended after ``target``'s existing ones, in
    ``library``'s order. Nothing happens when ``target`` is interface-only.

    Args:
        registry: Registry holding both targets.
        library: Target whose references are inherited.
        target: Target receiving the references.

    Returns:
        List[str]: The references that were actually appended.
    """
    if registry.is_interface_only(target):
        logger.debug("Skipping hook propagation onto INTERFACE library %s", target)
        return []

    inherited = hook_files(registry, library)
    if not inherited:
        return []

    current = registry.get_property(target, HOOK_FILES_PROPERTY)
    merged = [] if current is NOTFOUND else list(current)
    added: List[str] = []
    for reference in inherited:
        if reference not in merged:
            merged.append(reference)
            added.append(reference)

    registry.set_property(target, HOOK_FILES_PROPERTY, merged)
    if added:
        logger.debug("Propagated %d hook file(s) from %s to %s", len(added), library, target)
    registry.publish(
        EventType.HOOKS_PROPAGATED,
        source="hook_files",
        library=library,
        target=target,
        added=list(added),
    )
    return added
