from .bus import Event, EventBus, Subscription
from .feed_events import (
    BaselineFailedEvent,
    BaselineLoadedEvent,
    BaselineRequestedEvent,
    FeedEvent,
    TrailerResolvedEvent,
)

__all__ = [
    "BaselineFailedEvent",
    "BaselineLoadedEvent",
    "BaselineRequestedEvent",
    "Event",
    "EventBus",
    "FeedEvent",
    "Subscription",
    "TrailerResolvedEvent",
]
