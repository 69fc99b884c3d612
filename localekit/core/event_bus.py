#!/usr/bin/env python3
"""
Event Bus - synchronous observer registry.

Handlers run on the caller's thread before ``emit`` returns. Dispatch walks a
snapshot of the registry, so handlers may subscribe, unsubscribe or emit again
while an event is being delivered.
"""

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from localekit.core.events import EventType
from localekit.core.logging_utils import setup_logger

__all__ = ["EventBus", "EventType", "Event", "Subscription"]

logger = setup_logger(__name__)


@dataclass
class Event:
    """Event with type, payload, and metadata."""

    type: EventType
    payload: dict[str, Any]
    timestamp: float = 0.0
    source: str = "unknown"

    def __post_init__(self):
        if self.timestamp == 0:
            self.timestamp = time.time()


@dataclass(frozen=True)
class Subscription:
    """Handle returned by ``subscribe`` and accepted by ``unsubscribe``."""

    event_type: EventType
    handle: int


class EventBus:
    """Synchronous event bus keyed by subscriber handle.

    Features:
    - Any number of handlers per event type
    - Re-entrant dispatch over a stable snapshot
    - Handler failures are logged and do not stop delivery
    """

    def __init__(self):
        """Initialize event bus."""
        self._subscribers: dict[EventType, dict[int, Callable[[Event], None]]] = {}
        self._handles = itertools.count(1)
        self._running = True

        # Metrics
        self._events_emitted = 0
        self._handler_calls = 0
        self._handler_errors = 0

    def emit(
        self,
        event_type: EventType,
        payload: dict[str, Any] | None = None,
        source: str = "unknown",
    ) -> int:
        """Emit an event and deliver it to every current subscriber.

        Args:
            event_type: Type of event
            payload: Event data
            source: Source identifier (e.g., 'translation_store')

        Returns:
            Number of handlers invoked
        """
        if not self._running:
            return 0

        event = Event(type=event_type, payload=payload or {}, source=source)
        self._events_emitted += 1
        return self._dispatch(event)

    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> Subscription:
        """Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function(event)

        Returns:
            Subscription token for unsubscription
        """
        handle = next(self._handles)
        self._subscribers.setdefault(event_type, {})[handle] = handler
        return Subscription(event_type, handle)

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a subscription.

        Args:
            subscription: Token returned from subscribe()

        Returns:
            True if the subscription was active
        """
        handlers = self._subscribers.get(subscription.event_type)
        if handlers is None:
            return False
        return handlers.pop(subscription.handle, None) is not None

    def subscriber_count(self, event_type: EventType) -> int:
        """Number of active handlers for an event type."""
        return len(self._subscribers.get(event_type, {}))

    def _dispatch(self, event: Event) -> int:
        """Dispatch event to subscribers.

        Args:
            event: Event to dispatch

        Returns:
            Number of handlers invoked
        """
        live = self._subscribers.get(event.type, {})
        snapshot = list(live.items())
        called = 0

        for handle, handler in snapshot:
            # Removed by an earlier handler in this same dispatch
            if handle not in live:
                continue
            called += 1
            self._handler_calls += 1
            try:
                handler(event)
            except Exception as e:
                self._handler_errors += 1
                logger.error(f"Error in event handler for {event.type}: {e}")

        return called

    def get_metrics(self) -> dict[str, int]:
        """Get event bus metrics.

        Returns:
            Dictionary of metrics
        """
        return {
            "events_emitted": self._events_emitted,
            "handler_calls": self._handler_calls,
            "handler_errors": self._handler_errors,
            "subscribers": sum(len(h) for h in self._subscribers.values()),
        }

    def shutdown(self):
        """Stop delivering events and drop all subscribers."""
        self._running = False
        self._subscribers.clear()
