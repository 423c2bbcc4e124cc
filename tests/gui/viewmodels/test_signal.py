"""Tests for Signal, ObservableProperty and BaseViewModel.

These tests run without Qt.
"""

import pytest

from cinefeed.domain.models import Query
from cinefeed.events.bus import EventBus
from cinefeed.events.feed_events import BaselineRequestedEvent
from cinefeed.gui.viewmodels.base import BaseViewModel
from cinefeed.gui.viewmodels.signal import ObservableProperty, Signal


class TestSignal:
    def test_emit_reaches_handlers_with_all_args(self):
        sig = Signal()
        received = []
        sig.connect(lambda *args: received.append(args))

        sig.emit(Query("up"), 2)

        assert received == [(Query("up"), 2)]

    def test_disconnect(self):
        sig = Signal()
        received = []
        handler = received.append
        sig.connect(handler)
        sig.emit(1)
        sig.disconnect(handler)
        sig.emit(2)

        assert received == [1]

    def test_disconnect_missing_raises(self):
        with pytest.raises(ValueError):
            Signal().disconnect(lambda: None)

    def test_duplicate_connect_ignored(self):
        sig = Signal()
        handler = lambda: None
        sig.connect(handler)
        sig.connect(handler)

        assert sig.handler_count == 1

    def test_handler_exception_does_not_break_others(self):
        sig = Signal()
        received = []

        def bad_handler(v):
            raise RuntimeError("boom")

        sig.connect(bad_handler)
        sig.connect(received.append)
        sig.emit(1)

        assert received == [1]


class TestObservableProperty:
    def test_set_reports_change(self):
        prop = ObservableProperty(Query(), "query")

        assert prop.set(Query("  heat ")) is True
        assert prop.set(Query("heat")) is False
        assert repr(prop.changed) == "<Signal query.changed handlers=0>"

    def test_changed_emits_new_and_old(self):
        prop = ObservableProperty(1)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = 2
        prop.value = 2
        prop.value = 3

        assert changes == [(2, 1), (3, 2)]

    def test_equal_lists_do_not_emit(self):
        prop = ObservableProperty([1, 2])
        changes = []
        prop.changed.connect(lambda new, old: changes.append(new))

        prop.value = [1, 2]

        assert changes == []


class TestBaseViewModel:
    def test_dispose_cancels_subscriptions(self):
        bus = EventBus()
        vm = BaseViewModel()
        received = []

        sub = vm.subscribe_event(bus, BaselineRequestedEvent, lambda e: received.append(e.token))
        bus.publish(BaselineRequestedEvent(token=1))
        vm.dispose()
        bus.publish(BaselineRequestedEvent(token=2))

        assert received == [1]
        assert sub.active is False
        assert vm._subscriptions == []

    def test_signal_connections_released_once(self):
        vm = BaseViewModel()
        sig = Signal("entered")
        calls = []
        vm.connect_signal(sig, lambda: calls.append(True))

        sig.emit()
        vm.dispose()
        vm.dispose()
        sig.emit()

        assert calls == [True]
        assert sig.handler_count == 0
        assert vm.disposed is True
