import logging
import threading
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Type


@dataclass(kw_only=True)
class Event:
    """Mutable base for bus events that carry no domain payload."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Subscription:
    """Handle returned by ``subscribe``; ``cancel()`` silences it in place."""
    event_type: Type
    handler: Callable
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Synchronous publish/subscribe hub.

    Handlers run on the publishing thread.  Delivery follows the event's MRO,
    so a subscriber to a base class (``FeedEvent``) sees every subclass; within
    one class handlers run in subscription order.  A failing handler is logged
    and does not stop the others.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: Dict[type, List[Subscription]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: type, handler: Callable) -> Subscription:
        sub = Subscription(event_type=event_type, handler=handler)
        with self._lock:
            self._handlers[event_type].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.cancel()
        with self._lock:
            subs = self._handlers.get(subscription.event_type, [])
            if subscription in subs:
                subs.remove(subscription)

    def publish(self, event: object) -> None:
        with self._lock:
            subs = [
                sub
                for klass in type(event).__mro__
                for sub in self._handlers.get(klass, ())
            ]
            self._prune()

        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(event)
            except Exception:
                self._logger.exception("Handler failed for %s", type(event).__name__)

    def subscriber_count(self, event_type: type) -> int:
        with self._lock:
            return sum(1 for sub in self._handlers.get(event_type, ()) if sub.active)

    def _prune(self) -> None:
        for event_type, subs in list(self._handlers.items()):
            live = [sub for sub in subs if sub.active]
            if len(live) != len(subs):
                self._handlers[event_type] = live
