from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from cinefeed.errors import DecodeFailure


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class FeedPhase(str, Enum):
    INITIALIZING = "initializing"
    IDLE_WITH_MORE = "idle_with_more"
    LOADING_NEXT = "loading_next"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass(frozen=True)
class Item:
    id: int
    title: str = ""
    overview: str = ""
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False, hash=False)

    @classmethod
    def from_payload(cls, payload: Any) -> Item:
        if not isinstance(payload, dict) or "id" not in payload:
            raise DecodeFailure(f"Result entry without an id: {payload!r}")
        return cls(
            id=payload["id"],
            title=payload.get("title") or payload.get("name") or "",
            overview=payload.get("overview") or "",
            poster_path=payload.get("poster_path"),
            release_date=payload.get("release_date"),
            vote_average=payload.get("vote_average"),
            raw=dict(payload),
        )

    def to_payload(self) -> Dict[str, Any]:
        if self.raw:
            return dict(self.raw)
        return {
            "id": self.id,
            "title": self.title,
            "overview": self.overview,
            "poster_path": self.poster_path,
            "release_date": self.release_date,
            "vote_average": self.vote_average,
        }


@dataclass(frozen=True)
class ResultBatch:
    """Items returned by one (query, page) fetch."""

    items: List[Item] = field(default_factory=list)
    total_available: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class Video:
    key: str
    type: str = ""
    site: str = ""
    name: str = ""


@dataclass(frozen=True)
class FeedState:
    """Render-facing snapshot of the feed controller."""

    items: List[Item] = field(default_factory=list)
    has_more: bool = False
    error: bool = False
    page: int = 1
    phase: FeedPhase = FeedPhase.INITIALIZING
