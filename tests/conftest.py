import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Widgets are exercised headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cinefeed.domain.models import Item, Query, ResultBatch, Video  # noqa: E402
from cinefeed.events.bus import EventBus  # noqa: E402


@dataclass
class PendingJob:
    job: Callable[[], Any]
    on_success: Callable[[Any], None]
    on_failure: Callable[[Exception], None]

    def run(self) -> None:
        try:
            result = self.job()
        except Exception as exc:
            self.on_failure(exc)
            return
        self.on_success(result)


class ManualTaskRunner:
    """Queue jobs; the test decides when, and in which order, they finish."""

    def __init__(self) -> None:
        self.jobs: List[PendingJob] = []

    def submit(self, job, on_success, on_failure) -> None:
        self.jobs.append(PendingJob(job, on_success, on_failure))

    @property
    def pending(self) -> int:
        return len(self.jobs)

    def run(self, index: int = 0) -> None:
        self.jobs.pop(index).run()

    def run_last(self) -> None:
        self.run(len(self.jobs) - 1)

    def run_all(self) -> None:
        while self.jobs:
            self.run(0)


@dataclass
class FakeContentClient:
    """Stand-in for ContentApiClient keyed by ``(query_text, page)``."""

    pages: Dict[Tuple[str, int], Any] = field(default_factory=dict)
    videos: Dict[int, Any] = field(default_factory=dict)
    calls: List[Tuple[str, int]] = field(default_factory=list)
    video_calls: List[int] = field(default_factory=list)

    def fetch_page(self, query: Query, page: int) -> ResultBatch:
        self.calls.append((query.text, page))
        outcome = self.pages.get((query.text, page), ResultBatch())
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def fetch_videos(self, item_id: int) -> List[Video]:
        self.video_calls.append(item_id)
        outcome = self.videos.get(item_id, [])
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        pass


def _make_items(start: int, count: int, prefix: str = "Movie") -> List[Item]:
    return [Item(id=start + offset, title=f"{prefix} {start + offset}") for offset in range(count)]


@pytest.fixture
def make_items():
    return _make_items


@pytest.fixture
def make_batch():
    def _factory(start: int, count: int, total: int, prefix: str = "Movie") -> ResultBatch:
        return ResultBatch(items=_make_items(start, count, prefix), total_available=total)

    return _factory


@pytest.fixture
def runner() -> ManualTaskRunner:
    return ManualTaskRunner()


@pytest.fixture
def client() -> FakeContentClient:
    return FakeContentClient()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()
