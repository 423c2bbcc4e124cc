"""Pure Python FeedViewModel: the paginated feed controller.

Reconciles two sources of items:

* the page-1 *baseline* announced by the :class:`ResultStore` whenever a new
  query is dispatched (search box, home button), and
* pages 2..N fetched directly by this view model when the trailing sentinel
  of the feed scrolls into view.

Every fetch issued here captures the current *generation*.  A query change
bumps the generation, so completions belonging to a superseded query are
recognised and dropped instead of being appended to the new list.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from cinefeed.application.services.result_store import ResultStore
from cinefeed.application.services.task_runner import TaskRunner
from cinefeed.domain.models import FeedPhase, FeedState, Item, Query, ResultBatch
from cinefeed.errors.handler import ErrorHandler, severity_for
from cinefeed.events.bus import EventBus
from cinefeed.events.feed_events import (
    BaselineFailedEvent,
    BaselineLoadedEvent,
    BaselineRequestedEvent,
)
from cinefeed.gui.viewmodels.base import BaseViewModel
from cinefeed.gui.viewmodels.signal import ObservableProperty, Signal
from cinefeed.gui.viewmodels.visibility_sentinel import VisibilitySentinel
from cinefeed.infrastructure.content_api import ContentApiClient

LOGGER = logging.getLogger(__name__)


class FeedViewModel(BaseViewModel):
    """Feed controller, no Qt dependency.

    Phases::

        initializing ──baseline / own page 1──▶ idle_with_more | exhausted
        idle_with_more ──load_next_page()──▶ loading_next
        loading_next ──page fetched──▶ idle_with_more | exhausted
        initializing | loading_next ──fetch failed──▶ failed
        any ──query change──▶ initializing
    """

    def __init__(
        self,
        client: ContentApiClient,
        runner: TaskRunner,
        event_bus: EventBus,
        result_store: Optional[ResultStore] = None,
        *,
        error_handler: Optional[ErrorHandler] = None,
        deduplicate: bool = False,
    ) -> None:
        super().__init__()
        self._client = client
        self._runner = runner
        self._store = result_store
        self._error_handler = error_handler
        self._deduplicate = deduplicate

        self._generation = 0
        self._baseline_token = 0
        self._inflight_page: Optional[int] = None
        self._total_available = 0
        self._seen_ids: set = set()

        # Observable properties
        self.query = ObservableProperty(Query(), "query")
        self.items = ObservableProperty([], "items")
        self.page = ObservableProperty(1, "page")
        self.has_more = ObservableProperty(False, "has_more")
        self.error = ObservableProperty(False, "error")
        self.phase = ObservableProperty(FeedPhase.INITIALIZING, "phase")

        # Signals
        self.state_changed = Signal("state_changed")  # emits FeedState
        self.fetch_started = Signal("fetch_started")  # emits (query, page)

        self.subscribe_event(event_bus, BaselineRequestedEvent, self._on_baseline_requested)
        self.subscribe_event(event_bus, BaselineLoadedEvent, self._on_baseline_loaded)
        self.subscribe_event(event_bus, BaselineFailedEvent, self._on_baseline_failed)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def total_available(self) -> int:
        return self._total_available

    @property
    def state(self) -> FeedState:
        return FeedState(
            items=list(self.items.value),
            has_more=self.has_more.value,
            error=self.error.value,
            page=self.page.value,
            phase=self.phase.value,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def attach(self, query: Optional[Query] = None) -> None:
        """Mount the feed on *query*.

        Adopts the store's baseline when it already holds results for the
        query; otherwise fetches page 1 directly so the first paint does not
        wait for the store.
        """
        if query is None:
            snapshot_query = self._store.snapshot().query if self._store is not None else None
            query = snapshot_query or Query()
        self._reset(query)
        if self._store is not None:
            self._baseline_token = self._store.latest_token
            baseline = self._store.baseline_for(query)
            if baseline is not None:
                self._apply_first_page(baseline)
                return
        self._fetch(1)

    def load_next_page(self) -> bool:
        """Advance the cursor and fetch the next page.

        Returns ``False`` (and issues nothing) unless the feed is idle with
        more results available, which also prevents a second request while
        one is outstanding.
        """
        if self.phase.value != FeedPhase.IDLE_WITH_MORE or not self.has_more.value:
            LOGGER.debug("Ignoring pagination trigger in phase %s", self.phase.value.value)
            return False
        self.page.value = self.page.value + 1
        self.phase.value = FeedPhase.LOADING_NEXT
        self._publish_state()
        self._fetch(self.page.value)
        return True

    def bind_sentinel(self, sentinel: VisibilitySentinel) -> None:
        """Paginate whenever *sentinel* reports the trailing marker entering view."""
        self.connect_signal(sentinel.entered, self.load_next_page)

    # ------------------------------------------------------------------
    # Store events
    # ------------------------------------------------------------------
    def _on_baseline_requested(self, event: BaselineRequestedEvent) -> None:
        if event.page != 1:
            return
        self._reset(event.query)
        self._baseline_token = event.token

    def _on_baseline_loaded(self, event: BaselineLoadedEvent) -> None:
        if event.page != 1 or not self._accepts_baseline(event.token, event.query):
            return
        if self.phase.value != FeedPhase.INITIALIZING:
            LOGGER.debug("Baseline #%d arrived after page 1 was already shown", event.token)
            return
        self._apply_first_page(event.batch)

    def _on_baseline_failed(self, event: BaselineFailedEvent) -> None:
        if event.page != 1 or not self._accepts_baseline(event.token, event.query):
            return
        if self.phase.value != FeedPhase.INITIALIZING or self._inflight_page == 1:
            return
        self._fail()

    def _accepts_baseline(self, token: int, query: Query) -> bool:
        return token == self._baseline_token and query == self.query.value

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    def _fetch(self, page: int) -> None:
        generation = self._generation
        query = self.query.value
        self._inflight_page = page
        LOGGER.debug("Feed fetch gen=%d query=%s page=%d", generation, query, page)
        self.fetch_started.emit(query, page)
        self._runner.submit(
            lambda: self._client.fetch_page(query, page),
            lambda batch: self._on_page_fetched(generation, page, batch),
            lambda exc: self._on_page_failed(generation, page, exc),
        )

    def _on_page_fetched(self, generation: int, page: int, batch: ResultBatch) -> None:
        if generation != self._generation:
            LOGGER.debug("Discarding stale page %d (gen %d, current %d)", page, generation, self._generation)
            return
        self._clear_inflight(page)
        if page == 1:
            if self.phase.value != FeedPhase.INITIALIZING:
                return
            self._apply_first_page(batch)
            return
        self.items.value = self.items.value + self._merge(batch.items)
        self._settle(batch)

    def _clear_inflight(self, page: int) -> None:
        if self._inflight_page == page:
            self._inflight_page = None

    def _on_page_failed(self, generation: int, page: int, exc: Exception) -> None:
        if generation != self._generation:
            LOGGER.debug("Discarding stale failure for page %d (gen %d)", page, generation)
            return
        self._clear_inflight(page)
        if page == 1 and self.phase.value != FeedPhase.INITIALIZING:
            return
        self._report(exc, page)
        self._fail()

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def _reset(self, query: Query) -> None:
        self._generation += 1
        self._inflight_page = None
        self._total_available = 0
        self._seen_ids.clear()
        self.query.value = query
        self.page.value = 1
        self.items.value = []
        self.has_more.value = False
        self.error.value = False
        self.phase.value = FeedPhase.INITIALIZING
        self._publish_state()

    def _apply_first_page(self, batch: ResultBatch) -> None:
        self._seen_ids.clear()
        self.items.value = self._merge(batch.items)
        self._settle(batch)

    def _settle(self, batch: ResultBatch) -> None:
        self._total_available = batch.total_available
        if batch.is_empty or batch.total_available <= 0:
            has_more = False
        else:
            has_more = len(self.items.value) < batch.total_available
        self.has_more.value = has_more
        self.phase.value = FeedPhase.IDLE_WITH_MORE if has_more else FeedPhase.EXHAUSTED
        self._publish_state()

    def _fail(self) -> None:
        self.has_more.value = False
        self.error.value = True
        self.phase.value = FeedPhase.FAILED
        self._publish_state()

    def _merge(self, incoming: Iterable[Item]) -> List[Item]:
        if not self._deduplicate:
            return list(incoming)
        fresh: List[Item] = []
        for item in incoming:
            if item.id in self._seen_ids:
                continue
            self._seen_ids.add(item.id)
            fresh.append(item)
        return fresh

    def _report(self, exc: Exception, page: int) -> None:
        severity = severity_for(exc)
        context = {"query": self.query.value.text, "page": page}
        if self._error_handler is not None:
            self._error_handler.handle(exc, severity, context)
        else:
            LOGGER.error("Feed fetch failed for %s page %d: %s", self.query.value, page, exc)

    def _publish_state(self) -> None:
        self.state_changed.emit(self.state)
