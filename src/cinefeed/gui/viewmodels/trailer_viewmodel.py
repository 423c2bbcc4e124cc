"""State behind the trailer overlay."""

from __future__ import annotations

import logging
from typing import Optional

from cinefeed.application.services.task_runner import TaskRunner
from cinefeed.application.services.trailer_resolver import TrailerResolver
from cinefeed.config import YOUTUBE_WATCH_URL
from cinefeed.domain.models import Item
from cinefeed.events.bus import EventBus
from cinefeed.events.feed_events import TrailerResolvedEvent
from cinefeed.gui.viewmodels.base import BaseViewModel
from cinefeed.gui.viewmodels.signal import ObservableProperty, Signal


class TrailerViewModel(BaseViewModel):
    """Resolve a trailer per selection and expose it to the overlay.

    Each selection issues a fresh lookup.  When the user picks another item
    before the previous lookup returns, the older result is ignored.
    """

    def __init__(
        self,
        resolver: TrailerResolver,
        runner: TaskRunner,
        event_bus: EventBus,
    ) -> None:
        super().__init__()
        self._resolver = resolver
        self._runner = runner
        self._event_bus = event_bus
        self._selection_token = 0
        self._logger = logging.getLogger(__name__)

        # Observable properties
        self.selected_item = ObservableProperty(None, "selected_item")
        self.video_key = ObservableProperty(None, "video_key")
        self.resolving = ObservableProperty(False, "resolving")
        self.is_open = ObservableProperty(False, "is_open")

        # Signals
        self.opened = Signal("opened")  # emits (item, video_key)
        self.closed = Signal("closed")

    @property
    def title(self) -> str:
        item = self.selected_item.value
        return item.title if item is not None else ""

    @property
    def video_url(self) -> Optional[str]:
        key = self.video_key.value
        return YOUTUBE_WATCH_URL.format(key=key) if key else None

    def view_trailer(self, item: Item) -> None:
        """Select *item* and resolve its trailer in the background."""
        self._selection_token += 1
        token = self._selection_token
        self.selected_item.value = item
        self.video_key.value = None
        self.resolving.value = True
        self._runner.submit(
            lambda: self._resolver.resolve(item),
            lambda key: self._on_resolved(token, item, key),
            lambda exc: self._on_failed(token, item, exc),
        )

    def close(self) -> None:
        if not self.is_open.value:
            return
        self.is_open.value = False
        self.closed.emit()

    def _on_resolved(self, token: int, item: Item, key: Optional[str]) -> None:
        if token != self._selection_token:
            self._logger.debug("Ignoring trailer for superseded selection %s", item.id)
            return
        self.resolving.value = False
        self.video_key.value = key
        self.is_open.value = True
        self._event_bus.publish(TrailerResolvedEvent(item_id=item.id, video_key=key, source="trailer"))
        self.opened.emit(item, key)

    def _on_failed(self, token: int, item: Item, exc: Exception) -> None:
        if token != self._selection_token:
            self._logger.debug("Ignoring failure for superseded selection %s", item.id)
            return
        # The resolver absorbs fetch errors; anything reaching here is unexpected.
        self._logger.error("Trailer lookup for %s raised: %s", item.id, exc)
        self._on_resolved(token, item, None)
