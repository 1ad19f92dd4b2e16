"""Runtime support: event bus and configuration sessions."""

from linkhooks.runtime.eventbus import Event, EventBus, EventHandler, EventType

__all__ = [
    "Event",
    "EventBus",
    "EventHandler",
    "EventType",
]
