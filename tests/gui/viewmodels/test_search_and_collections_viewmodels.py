"""Tests for SearchViewModel and CollectionsViewModel."""

import pytest

from cinefeed.application.services.result_store import ResultStore
from cinefeed.domain.models import Item, Query
from cinefeed.events.feed_events import BaselineRequestedEvent
from cinefeed.gui.viewmodels.collections_viewmodel import (
    STARRED,
    WATCH_LATER,
    CollectionsViewModel,
)
from cinefeed.gui.viewmodels.search_viewmodel import SearchViewModel


class FakeSettings:
    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self.writes = []

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.writes.append((key, value))


class TestSearchViewModel:
    def test_search_dispatches_page_one(self, client, runner, bus):
        store = ResultStore(client, runner, bus)
        vm = SearchViewModel(store)
        requested = []
        bus.subscribe(BaselineRequestedEvent, requested.append)

        token = vm.search("  matrix ")

        assert token == store.latest_token
        assert vm.current_query == Query("matrix")
        assert [(e.query.text, e.page) for e in requested] == [("matrix", 1)]
        runner.run_all()
        assert client.calls == [("matrix", 1)]

    def test_every_edit_dispatches(self, client, runner, bus):
        store = ResultStore(client, runner, bus)
        vm = SearchViewModel(store)

        vm.search("m")
        vm.search("ma")
        vm.search("mat")

        assert store.latest_token == 3
        assert runner.pending == 3

    def test_go_home_returns_to_discover(self, client, runner, bus):
        store = ResultStore(client, runner, bus)
        vm = SearchViewModel(store)
        queries = []
        vm.query_changed.connect(queries.append)

        vm.search("dune")
        vm.go_home()

        assert vm.search_term.value == ""
        assert queries[-1].is_discover
        assert store.snapshot().query == Query()


class TestCollectionsViewModel:
    def test_toggle_adds_and_removes(self):
        settings = FakeSettings()
        vm = CollectionsViewModel(settings)
        item = Item(id=1, title="Alien")

        assert vm.toggle(STARRED, item) is True
        assert vm.contains(STARRED, item)
        assert vm.starred_count() == 1

        assert vm.toggle(STARRED, item) is False
        assert vm.starred_count() == 0

    def test_toggle_persists_payloads(self):
        settings = FakeSettings()
        vm = CollectionsViewModel(settings)

        vm.toggle(WATCH_LATER, Item(id=9, title="Heat"))

        key, payload = settings.writes[-1]
        assert key == WATCH_LATER
        assert payload[0]["id"] == 9
        assert payload[0]["title"] == "Heat"

    def test_loads_existing_entries_and_drops_malformed(self):
        settings = FakeSettings({STARRED: [{"id": 3, "title": "Up"}, {"title": "no id"}]})

        vm = CollectionsViewModel(settings)

        assert [item.id for item in vm.items(STARRED)] == [3]
        assert vm.items(WATCH_LATER) == []

    def test_change_signal(self):
        vm = CollectionsViewModel(FakeSettings())
        changes = []
        vm.collection_changed.connect(lambda name, items: changes.append((name, len(items))))

        vm.toggle(STARRED, Item(id=1))
        vm.clear(STARRED)

        assert changes == [(STARRED, 1), (STARRED, 0)]

    def test_unknown_collection(self):
        vm = CollectionsViewModel(FakeSettings())

        with pytest.raises(KeyError):
            vm.items("favourites")
