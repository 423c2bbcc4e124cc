"""Events exchanged between the result store, the feed and the trailer overlay."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from cinefeed.domain.models import Query, ResultBatch


@dataclass(frozen=True, kw_only=True)
class FeedEvent:
    """Immutable base; ``source`` names the publishing component."""
    source: str = ""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, kw_only=True)
class BaselineRequestedEvent(FeedEvent):
    query: Query = field(default_factory=Query)
    page: int = 1
    token: int = 0


@dataclass(frozen=True, kw_only=True)
class BaselineLoadedEvent(FeedEvent):
    query: Query = field(default_factory=Query)
    page: int = 1
    token: int = 0
    batch: ResultBatch = field(default_factory=ResultBatch)


@dataclass(frozen=True, kw_only=True)
class BaselineFailedEvent(FeedEvent):
    query: Query = field(default_factory=Query)
    page: int = 1
    token: int = 0
    reason: str = ""


@dataclass(frozen=True, kw_only=True)
class TrailerResolvedEvent(FeedEvent):
    item_id: int = 0
    video_key: Optional[str] = None
