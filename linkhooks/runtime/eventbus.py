"""Event bus for configuration-pass observers.

The registry and the link annotator publish structured events (targets
declared, links added, hooks registered, propagated and invoked). Observers
such as the CLI trace subscribe to them without taking part in the pass.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger("linkhooks.runtime.eventbus")


class EventType(Enum):
    """Event types published during a configuration pass."""

    TARGET_DECLARED = auto()
    PROPERTY_SET = auto()
    LINK_ADDED = auto()
    HOOK_REGISTERED = auto()
    HOOKS_PROPAGATED = auto()
    HOOK_INVOKED = auto()


@dataclass
class Event:
    """Structured event payload.

    Attributes:
        event_type: Type of event.
        source: Component that published the event.
        data: Event payload.
    """

    event_type: EventType
    source: str
    data: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"Event({self.event_type.name}, source={self.source})"


EventHandler = Callable[[Event], None]

# Handlers stored under this key receive every event type.
_ALL = None


class EventBus:
    """Synchronous publish/subscribe bus for one configuration pass.

    Handlers run on the publishing call, in subscription order, with
    type-specific handlers before catch-all ones. A handler that raises is
    logged and the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Optional[EventType], List[Tuple[str, EventHandler]]] = defaultdict(
            list
        )

    def subscribe(
        self, event_type: EventType, handler: EventHandler, name: Optional[str] = None
    ) -> None:
        """Call ``handler`` for every published event of ``event_type``."""
        handler_name = name or getattr(handler, "__name__", "anonymous")
        self._handlers[event_type].append((handler_name, handler))
        logger.debug("Handler %s subscribed to %s", handler_name, event_type.name)

    def subscribe_all(self, handler: EventHandler, name: Optional[str] = None) -> None:
        """Call ``handler`` for every published event."""
        handler_name = name or getattr(handler, "__name__", "anonymous")
        self._handlers[_ALL].append((handler_name, handler))
        logger.debug("Handler %s subscribed to all events", handler_name)

    def has_subscribers(self, event_type: EventType) -> bool:
        return bool(self._handlers.get(event_type) or self._handlers.get(_ALL))

    def publish(self, event: Event) -> None:
        handlers = [*self._handlers.get(event.event_type, ()), *self._handlers.get(_ALL, ())]
        for handler_name, handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Handler %s failed for event %s", handler_name, event.event_type.name
                )
