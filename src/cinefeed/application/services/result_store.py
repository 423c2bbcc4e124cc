"""Single-slot store for the page-1 result set of the active query.

The store never hands out its list for mutation.  Every dispatch is tagged
with a monotonically increasing token and announced on the event bus; only
the completion carrying the latest token is applied and republished, so a
superseded query can never overwrite the slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from cinefeed.application.services.task_runner import TaskRunner
from cinefeed.domain.models import FetchStatus, Item, Query, ResultBatch
from cinefeed.errors.handler import ErrorHandler, severity_for
from cinefeed.events.bus import EventBus
from cinefeed.events.feed_events import (
    BaselineFailedEvent,
    BaselineLoadedEvent,
    BaselineRequestedEvent,
)
from cinefeed.infrastructure.content_api import ContentApiClient

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSnapshot:
    query: Optional[Query] = None
    items: List[Item] = field(default_factory=list)
    total_available: int = 0
    status: FetchStatus = FetchStatus.IDLE
    token: int = 0


class ResultStore:
    """Hold the baseline result list and its :class:`FetchStatus`."""

    def __init__(
        self,
        client: ContentApiClient,
        runner: TaskRunner,
        event_bus: EventBus,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._client = client
        self._runner = runner
        self._events = event_bus
        self._error_handler = error_handler

        self._query: Optional[Query] = None
        self._items: List[Item] = []
        self._total_available = 0
        self._status = FetchStatus.IDLE
        self._token = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    @property
    def latest_token(self) -> int:
        return self._token

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            query=self._query,
            items=list(self._items),
            total_available=self._total_available,
            status=self._status,
            token=self._token,
        )

    def baseline_for(self, query: Query) -> Optional[ResultBatch]:
        """Return the stored page-1 batch when it belongs to *query*."""

        if self._status != FetchStatus.SUCCESS or self._query != query or not self._items:
            return None
        return ResultBatch(items=list(self._items), total_available=self._total_available)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch_fetch(self, query: Query, page: int = 1) -> int:
        """Request *page* of *query* and return the token tagging this dispatch."""

        self._token += 1
        token = self._token
        self._query = query
        self._status = FetchStatus.LOADING
        LOGGER.debug("Store dispatch #%d: query=%s page=%d", token, query, page)
        self._events.publish(BaselineRequestedEvent(query=query, page=page, token=token, source="store"))

        self._runner.submit(
            lambda: self._client.fetch_page(query, page),
            lambda batch: self._on_fetched(token, query, page, batch),
            lambda exc: self._on_failed(token, query, page, exc),
        )
        return token

    def _on_fetched(self, token: int, query: Query, page: int, batch: ResultBatch) -> None:
        if token != self._token:
            LOGGER.debug("Discarding stale store result #%d (latest #%d)", token, self._token)
            return
        if page == 1:
            self._items = list(batch.items)
        else:
            self._items = self._items + list(batch.items)
        self._total_available = batch.total_available
        self._status = FetchStatus.SUCCESS
        self._events.publish(
            BaselineLoadedEvent(query=query, page=page, token=token, batch=batch, source="store")
        )

    def _on_failed(self, token: int, query: Query, page: int, exc: Exception) -> None:
        if token != self._token:
            LOGGER.debug("Discarding stale store failure #%d (latest #%d)", token, self._token)
            return
        self._status = FetchStatus.ERROR
        self._report(exc, query, page)
        self._events.publish(
            BaselineFailedEvent(query=query, page=page, token=token, reason=str(exc), source="store")
        )

    def _report(self, exc: Exception, query: Query, page: int) -> None:
        severity = severity_for(exc)
        if self._error_handler is not None:
            self._error_handler.handle(exc, severity, {"query": query.text, "page": page})
        else:
            LOGGER.error("Store fetch failed for %s page %d: %s", query, page, exc)


__all__ = ["ResultStore", "StoreSnapshot"]
