"""Starred and watch-later collections."""

from __future__ import annotations

import logging
from typing import Any, List

from cinefeed.domain.models import Item
from cinefeed.errors import DecodeFailure
from cinefeed.gui.viewmodels.base import BaseViewModel
from cinefeed.gui.viewmodels.signal import ObservableProperty, Signal

STARRED = "starred"
WATCH_LATER = "watch_later"
COLLECTION_NAMES = (STARRED, WATCH_LATER)


class CollectionsViewModel(BaseViewModel):
    """Keep user collections in memory and persist them through *settings*.

    ``settings`` is any object exposing ``get(key, default)`` and
    ``set(key, value)``, normally the :class:`SettingsManager`.
    """

    def __init__(self, settings: Any) -> None:
        super().__init__()
        self._settings = settings
        self._logger = logging.getLogger(__name__)

        self.starred = ObservableProperty(self._load(STARRED), "starred")
        self.watch_later = ObservableProperty(self._load(WATCH_LATER), "watch_later")
        self.collection_changed = Signal("collection_changed")  # emits (name, items)

    def items(self, name: str) -> List[Item]:
        return list(self._property(name).value)

    def contains(self, name: str, item: Item) -> bool:
        return any(entry.id == item.id for entry in self._property(name).value)

    def toggle(self, name: str, item: Item) -> bool:
        """Add or remove *item*; returns ``True`` when it is now a member."""
        current = list(self._property(name).value)
        if self.contains(name, item):
            current = [entry for entry in current if entry.id != item.id]
            member = False
        else:
            current.append(item)
            member = True
        self._store(name, current)
        return member

    def clear(self, name: str) -> None:
        self._store(name, [])

    def starred_count(self) -> int:
        return len(self.starred.value)

    def _property(self, name: str) -> ObservableProperty:
        if name == STARRED:
            return self.starred
        if name == WATCH_LATER:
            return self.watch_later
        raise KeyError(f"Unknown collection: {name}")

    def _store(self, name: str, items: List[Item]) -> None:
        self._property(name).value = items
        self._settings.set(name, [item.to_payload() for item in items])
        self.collection_changed.emit(name, list(items))

    def _load(self, name: str) -> List[Item]:
        items: List[Item] = []
        for payload in self._settings.get(name, []) or []:
            try:
                items.append(Item.from_payload(payload))
            except DecodeFailure as exc:
                self._logger.warning("Dropping malformed %s entry: %s", name, exc)
        return items
