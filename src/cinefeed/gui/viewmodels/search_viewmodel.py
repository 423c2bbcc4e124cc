"""Pure Python SearchViewModel: turns search-box input into store dispatches."""

from __future__ import annotations

import logging

from cinefeed.application.services.result_store import ResultStore
from cinefeed.domain.models import Query
from cinefeed.gui.viewmodels.base import BaseViewModel
from cinefeed.gui.viewmodels.signal import ObservableProperty, Signal


class SearchViewModel(BaseViewModel):
    """Search/navigation collaborator of the feed.

    Every edit of the search term dispatches a page-1 fetch for the new
    query; the feed reacts to the store's events, not to this view model.
    """

    def __init__(self, result_store: ResultStore) -> None:
        super().__init__()
        self._store = result_store
        self._logger = logging.getLogger(__name__)

        self.search_term = ObservableProperty("", "search_term")
        self.query_changed = Signal("query_changed")  # emits Query

    @property
    def current_query(self) -> Query:
        return Query.from_text(self.search_term.value)

    def search(self, text: str) -> int:
        """Record *text* and dispatch its first page; returns the store token."""
        self.search_term.value = text or ""
        query = Query.from_text(text)
        self._logger.debug("Search dispatch for %s", query)
        token = self._store.dispatch_fetch(query, 1)
        self.query_changed.emit(query)
        return token

    def go_home(self) -> int:
        """Clear the search term and return to discover mode."""
        return self.search("")
