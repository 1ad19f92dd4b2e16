"""Dependency link annotator.

Links libraries to a consumer exactly like the native link primitive, then
runs the ``on_linked_as_dependency`` hooks each linked library carries. With
no hooks registered anywhere the result is identical to plain linking.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from linkhooks.errors import ConfigurationError, HookExecutionError, InvalidLinkError
from linkhooks.graph.registry import Target, TargetRegistry
from linkhooks.graph.schema import LinkEdge, LinkScope, parse_scope
from linkhooks.linking.hook_files import hook_files
from linkhooks.linking.loader import HookLoader
from linkhooks.runtime.eventbus import EventType

logger = logging.getLogger("linkhooks.linking.annotator")

LinkItem = Tuple[Union[LinkScope, str], str]


def _token_name(token: Any) -> str:
    if isinstance(token, Target):
        return token.name
    if isinstance(token, Path):
        return str(token)
    if isinstance(token, str):
        return token
    raise InvalidLinkError(f"Cannot link {token!r}: expected a target or library name")


def iter_link_items(tokens: Iterable[Any]) -> Iterator[Tuple[LinkScope, str]]:
    """Turn a mixed token list into ``(scope, item)`` pairs.

    The scope starts as PUBLIC and a keyword token applies to every item
    after it until the next keyword. Empty tokens are dropped.
    """
    scope = LinkScope.PUBLIC
    for token in tokens:
        keyword = parse_scope(token)
        if keyword is not None:
            scope = keyword
            continue
        name = _token_name(token)
        if not name:
            continue
        yield scope, name


def link_with_hooks(
    registry: TargetRegistry,
    consumer: str,
    *args: Any,
    loader: Optional[HookLoader] = None,
) -> List[LinkEdge]:
    """Link dependencies given as scope keywords mixed with names.

    ``link_with_hooks(reg, "App", "PUBLIC", "Core", "PRIVATE", "Util", "m")``
    links ``Core`` publicly and ``Util`` and ``m`` privately.

    Returns:
        List[LinkEdge]: One edge per linked item, in argument order.
    """
    return link_dependencies(registry, consumer, iter_link_items(args), loader=loader)


def link_dependencies(
    registry: TargetRegistry,
    consumer: str,
    items: Iterable[LinkItem],
    loader: Optional[HookLoader] = None,
) -> List[LinkEdge]:
    """Link ``(scope, item)`` pairs to ``consumer`` and run their hooks.

    Items are resolved one at a time, so a target declared by an earlier
    item's hook is treated as a target when a later item names it.

    Raises:
        UnknownTargetError: If ``consumer`` is not declared.
        HookLoadError: If a registered hook file cannot be loaded.
        HookExecutionError: If a hook callback raises.
    """
    loader = loader or HookLoader()
    handle = registry.target(_token_name(consumer), loader=loader)

    edges: List[LinkEdge] = []
    for scope, item in items:
        edges.append(_link_item(registry, handle, LinkScope(scope), _token_name(item), loader))
    return edges


def _link_item(
    registry: TargetRegistry,
    consumer: Target,
    scope: LinkScope,
    item: str,
    loader: HookLoader,
) -> LinkEdge:
    edge = registry.link(consumer.name, scope, item)
    if not registry.is_target(item):
        # System or platform library name: plain link only.
        return edge
    if registry.is_interface_only(item):
        return edge

    for reference in hook_files(registry, item):
        callback = loader.load(reference)
        if callback is None:
            continue
        logger.debug("Running hook %s of %s for %s", reference, item, consumer.name)
        try:
            callback(consumer)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise HookExecutionError(
                f"Hook {reference} of '{item}' failed while linking '{consumer.name}': {exc}"
            ) from exc
        registry.publish(
            EventType.HOOK_INVOKED,
            source="annotator",
            consumer=consumer.name,
            dependency=item,
            hook_file=reference,
        )
    return edge
