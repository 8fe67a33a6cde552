"""
Base classes for domain events and change subscriptions.

Subscribers get a ``Subscription`` handle back and must call
``unsubscribe()`` when they are torn down. The dispatcher is created at
application startup and closed at shutdown.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional
from datetime import datetime
from dataclasses import dataclass, field
import uuid


logger = logging.getLogger(__name__)

EventCallback = Callable[["DomainEvent"], Awaitable[None]]

ALL_EVENTS = "*"


@dataclass
class DomainEvent(ABC):
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()), kw_only=True)
    occurred_at: datetime = field(default_factory=datetime.utcnow, kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data()
        }

    @abstractmethod
    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        pass


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """Handle a domain event."""
        pass


class Subscription:
    """Handle for one registered callback."""

    def __init__(self, dispatcher: "EventDispatcher", event_type: str, callback: EventCallback):
        self.subscription_id = str(uuid.uuid4())
        self.event_type = event_type
        self.callback = callback
        self._dispatcher = dispatcher
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop receiving events. Safe to call more than once."""
        if not self._active:
            return
        self._dispatcher._remove(self)
        self._active = False

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.unsubscribe()


class EventDispatcher:
    """Dispatches domain events to subscribed callbacks and handlers."""

    def __init__(self):
        """Initialize event dispatcher."""
        self._subscriptions: Dict[str, List[Subscription]] = {}
        self._closed = False

    def subscribe(self, event_type: str, callback: EventCallback) -> Subscription:
        """Register ``callback`` for ``event_type`` (or ``ALL_EVENTS``)."""
        if self._closed:
            raise RuntimeError("Event dispatcher is closed")
        subscription = Subscription(self, event_type, callback)
        self._subscriptions.setdefault(event_type, []).append(subscription)
        logger.debug(f"Subscribed {subscription.subscription_id} to {event_type}")
        return subscription

    def register_handler(self, event_type: str, handler: EventHandler) -> Subscription:
        """Register an event handler for a specific event type."""
        subscription = self.subscribe(event_type, handler.handle)
        logger.info(f"Registered handler {handler.__class__.__name__} for {event_type}")
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        subscribers = self._subscriptions.get(subscription.event_type, [])
        if subscription in subscribers:
            subscribers.remove(subscription)
        if not subscribers:
            self._subscriptions.pop(subscription.event_type, None)
        logger.debug(f"Unsubscribed {subscription.subscription_id} from {subscription.event_type}")

    def subscriber_count(self, event_type: Optional[str] = None) -> int:
        if event_type is None:
            return sum(len(subs) for subs in self._subscriptions.values())
        return len(self._subscriptions.get(event_type, []))

    async def dispatch(self, event: DomainEvent) -> None:
        """Dispatch event to all subscribers of its type and of ``ALL_EVENTS``."""
        subscribers = (
            list(self._subscriptions.get(event.event_type, []))
            + list(self._subscriptions.get(ALL_EVENTS, []))
        )

        if not subscribers:
            logger.debug(f"No subscribers for event: {event.event_type}")
            return

        logger.info(f"Dispatching event: {event.event_type} (ID: {event.event_id})")
        await asyncio.gather(*(self._safe_handle(sub, event) for sub in subscribers))

    async def _safe_handle(self, subscription: Subscription, event: DomainEvent) -> None:
        """Run one callback; a failing subscriber never affects the others."""
        try:
            await subscription.callback(event)
        except Exception:
            logger.exception(
                f"Subscriber {subscription.subscription_id} failed to process {event.event_type}"
            )

    def close(self) -> None:
        """Drop every subscription; used at application shutdown."""
        for subscribers in list(self._subscriptions.values()):
            for subscription in list(subscribers):
                subscription.unsubscribe()
        self._closed = True
