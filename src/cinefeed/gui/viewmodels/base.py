"""Lifetime bookkeeping shared by the view models."""

from __future__ import annotations

import logging
from typing import Callable, Type

from cinefeed.events.bus import EventBus, Subscription
from cinefeed.gui.viewmodels.signal import Signal


class BaseViewModel:
    """Track bus subscriptions and signal connections so ``dispose()`` undoes them.

    ``dispose()`` is idempotent; the desktop window and the CLI may both call
    it on the same view model.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._connections: list[tuple[Signal, Callable]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def connect_signal(self, signal: Signal, handler: Callable) -> None:
        """Connect *handler* to *signal* for the lifetime of this view model."""
        signal.connect(handler)
        self._connections.append((signal, handler))

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        for sub in self._subscriptions:
            sub.cancel()
        for signal, handler in self._connections:
            try:
                signal.disconnect(handler)
            except ValueError:
                logging.getLogger(__name__).debug("%s already disconnected", signal.name)
        self._subscriptions.clear()
        self._connections.clear()
