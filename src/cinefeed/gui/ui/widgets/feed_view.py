"""Infinite-scrolling card grid bound to a :class:`FeedViewModel`."""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QScrollArea, QVBoxLayout, QWidget

from cinefeed.config import (
    FEED_ERROR_TEXT,
    FEED_LOADING_MORE_TEXT,
    FEED_LOADING_TEXT,
    GRID_SPACING,
)
from cinefeed.domain.models import FeedPhase, Item
from cinefeed.gui.viewmodels.collections_viewmodel import (
    STARRED,
    WATCH_LATER,
    CollectionsViewModel,
)
from cinefeed.gui.viewmodels.feed_viewmodel import FeedViewModel
from cinefeed.gui.viewmodels.visibility_sentinel import VisibilitySentinel

from .flow_layout import CardFlowLayout
from .movie_card import MovieCard
from .scroll_sentinel import ScrollSentinelBinder

_logger = logging.getLogger(__name__)

NO_RESULTS_TEXT = "No movies found."


class FeedView(QScrollArea):
    """Render feed state; the trailing marker drives pagination."""

    trailerRequested = Signal(object)

    def __init__(
        self,
        viewmodel: FeedViewModel,
        sentinel: VisibilitySentinel,
        collections: Optional[CollectionsViewModel] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._viewmodel = viewmodel
        self._sentinel = sentinel
        self._collections = collections
        self._cards: List[MovieCard] = []

        self.setObjectName("feedView")
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        container = QWidget(self)
        container.setObjectName("feedContainer")
        layout = QVBoxLayout(container)
        layout.setContentsMargins(GRID_SPACING, GRID_SPACING, GRID_SPACING, GRID_SPACING)
        layout.setSpacing(GRID_SPACING)

        self.status_label = QLabel(FEED_LOADING_TEXT, container)
        self.status_label.setObjectName("feedStatus")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.status_label)

        self.grid = QWidget(container)
        self.grid.setObjectName("feedGrid")
        self.grid_layout = CardFlowLayout(self.grid, spacing=GRID_SPACING)
        layout.addWidget(self.grid)

        self.marker = QLabel(FEED_LOADING_MORE_TEXT, container)
        self.marker.setObjectName("feedMarker")
        self.marker.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.marker.setMinimumHeight(32)
        layout.addWidget(self.marker)
        layout.addStretch(1)

        self.setWidget(container)
        self._binder = ScrollSentinelBinder(self, self.marker, sentinel, self)

        viewmodel.bind_sentinel(sentinel)
        viewmodel.items.changed.connect(self._on_items_changed)
        viewmodel.has_more.changed.connect(lambda *_: self._refresh_chrome())
        viewmodel.error.changed.connect(lambda *_: self._refresh_chrome())
        viewmodel.phase.changed.connect(self._on_phase_changed)
        if collections is not None:
            collections.collection_changed.connect(self._on_collection_changed)

        self._on_items_changed(viewmodel.items.value, [])
        self._refresh_chrome()

    @property
    def cards(self) -> List[MovieCard]:
        return list(self._cards)

    # ------------------------------------------------------------------
    # View-model bindings
    # ------------------------------------------------------------------
    def _on_items_changed(self, items: List[Item], old: List[Item]) -> None:
        shown = len(self._cards)
        if shown and len(items) >= shown and items[:shown] == old[:shown]:
            new_items = items[shown:]
        else:
            _logger.debug("Rebuilding feed grid with %d items", len(items))
            self.grid_layout.clear()
            self._cards.clear()
            self.verticalScrollBar().setValue(0)
            new_items = items
        for item in new_items:
            self._add_card(item)
        self._refresh_chrome()

    def _on_phase_changed(self, phase: FeedPhase, _old: FeedPhase) -> None:
        self._refresh_chrome()
        if phase == FeedPhase.IDLE_WITH_MORE:
            # A marker that is still on screen after a page landed must be
            # able to fire again.
            self._sentinel.reset()
            self._binder.schedule_check()

    def _on_collection_changed(self, name: str, _items: list) -> None:
        if self._collections is None:
            return
        for card in self._cards:
            if name == STARRED:
                card.set_starred(self._collections.contains(STARRED, card.item))
            elif name == WATCH_LATER:
                card.set_watch_later(self._collections.contains(WATCH_LATER, card.item))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _add_card(self, item: Item) -> None:
        starred = watch_later = False
        if self._collections is not None:
            starred = self._collections.contains(STARRED, item)
            watch_later = self._collections.contains(WATCH_LATER, item)
        card = MovieCard(item, self.grid, starred=starred, watch_later=watch_later)
        card.trailerRequested.connect(self.trailerRequested.emit)
        if self._collections is not None:
            card.starToggled.connect(lambda it: self._collections.toggle(STARRED, it))
            card.watchLaterToggled.connect(lambda it: self._collections.toggle(WATCH_LATER, it))
        self.grid_layout.addWidget(card)
        self._cards.append(card)

    def _refresh_chrome(self) -> None:
        vm = self._viewmodel
        if vm.error.value:
            self.status_label.setText(FEED_ERROR_TEXT)
            self.status_label.show()
            self.grid.hide()
        elif not self._cards:
            exhausted = vm.phase.value == FeedPhase.EXHAUSTED
            self.status_label.setText(NO_RESULTS_TEXT if exhausted else FEED_LOADING_TEXT)
            self.status_label.show()
            self.grid.hide()
        else:
            self.status_label.hide()
            self.grid.show()

        show_marker = bool(vm.has_more.value) and not vm.error.value
        self.marker.setVisible(show_marker)
        self._sentinel.set_marker_present(show_marker)
        if show_marker:
            self._binder.schedule_check()
