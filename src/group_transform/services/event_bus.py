"""
Group Transform - Event Bus

Synchronous typed event dispatch. Each event class has its own handler
table; emit() calls the handlers registered for the event's exact class
in subscription order.

Dispatch is re-entrant: a handler may emit further events (a resize
cascade resizing a nested group, for example) and those are delivered
immediately, before the outer dispatch continues.
"""

import logging
from typing import Callable, Dict, List, Type

from group_transform.models.events import EVENT_TYPES, TransformEvent

Handler = Callable[[TransformEvent], None]


class EventBus:
    """Typed publish/subscribe hub for transform events"""

    def __init__(self):
        self._logger = logging.getLogger('EventBus')
        self._handlers: Dict[Type, List[Handler]] = {event_type: [] for event_type in EVENT_TYPES}

    def subscribe(self, event_type: Type, handler: Handler):
        """Register a handler for one event class

        Subscribing the same handler twice is a no-op.

        Args:
            event_type: RotateEvent, ResizeEvent or MoveEvent
            handler: Callable receiving the event

        Raises:
            ValueError: If event_type is not a transform event class
        """
        handlers = self._table(event_type)
        if handler in handlers:
            return
        handlers.append(handler)
        self._logger.debug(f"Subscribed {getattr(handler, '__qualname__', handler)} to {event_type.kind}")

    def unsubscribe(self, event_type: Type, handler: Handler):
        """Remove a handler (no-op if it was not subscribed)"""
        handlers = self._table(event_type)
        if handler in handlers:
            handlers.remove(handler)
            self._logger.debug(f"Unsubscribed {getattr(handler, '__qualname__', handler)} from {event_type.kind}")

    def handler_count(self, event_type: Type) -> int:
        return len(self._table(event_type))

    def emit(self, event: TransformEvent):
        """Deliver an event to every handler of its class

        Handlers run in subscription order. The handler list is copied
        first, so (un)subscriptions made during dispatch apply to the
        next event. A failing handler is logged and the remaining
        handlers still run.

        Args:
            event: Transform event instance
        """
        handlers = list(self._table(type(event)))
        self._logger.debug(f"Emit {event.kind} for '{event.target_id}' to {len(handlers)} handlers")
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                self._logger.exception(f"Handler {getattr(handler, '__qualname__', handler)} failed on {event!r}")

    def _table(self, event_type: Type) -> List[Handler]:
        handlers = self._handlers.get(event_type)
        if handlers is None:
            raise ValueError(f"Unknown event type: {event_type!r}")
        return handlers
