"""
Synchronous change notification for resource nodes.

Each node carries its own observer list. Observers are keyed by event kind
and, for attribute/relationship events, by the field name they watch.
Delivery happens inline, in subscription order.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any


class NodeEvent(StrEnum):
    """Kind of notification a node emits."""

    ATTRIBUTE_UPDATED = "ATTRIBUTE_UPDATED"
    RELATIONSHIP_UPDATED = "RELATIONSHIP_UPDATED"
    DESTROYED = "DESTROYED"


Topic = tuple[NodeEvent, str | None]


class Observable:
    """Per-instance observer list with subscribe/unsubscribe/notify."""

    def __init__(self) -> None:
        self._observers: dict[Topic, list[Callable[..., Any]]] = {}

    def subscribe(self, event: NodeEvent, callback: Callable[..., Any], name: str | None = None) -> None:
        """
        Register a callback.

        Args:
            event: Event kind to listen for
            callback: Called with the new value (no arguments for DESTROYED)
            name: Attribute or relationship name the subscription is scoped to

        Raises:
            ValueError: name given for DESTROYED, or missing for a field event
        """
        event = NodeEvent(event)
        if event == NodeEvent.DESTROYED and name is not None:
            raise ValueError("DESTROYED subscriptions are not scoped to a field name")
        if event != NodeEvent.DESTROYED and name is None:
            raise ValueError(f"{event} subscriptions need the attribute or relationship name to watch")
        self._observers.setdefault((event, name), []).append(callback)

    def unsubscribe(self, event: NodeEvent, callback: Callable[..., Any], name: str | None = None) -> None:
        """Remove a previously registered callback. Unknown callbacks are ignored."""
        topic = (NodeEvent(event), name)
        callbacks = self._observers.get(topic)
        if not callbacks or callback not in callbacks:
            return
        callbacks.remove(callback)
        if not callbacks:
            del self._observers[topic]

    def notify(self, event: NodeEvent, *args: Any, name: str | None = None) -> None:
        """Deliver an event to every callback currently subscribed to it."""
        # Snapshot so callbacks may (un)subscribe while being delivered to
        for callback in list(self._observers.get((NodeEvent(event), name), ())):
            callback(*args)

    def observer_count(self, event: NodeEvent | None = None) -> int:
        """Number of registered callbacks, optionally for one event kind."""
        return sum(
            len(callbacks)
            for (kind, _), callbacks in self._observers.items()
            if event is None or kind == event
        )

    def remove_all_observers(self) -> None:
        """Drop every subscription."""
        self._observers.clear()
