"""QThreadPool-backed task runner for network fetches."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from cinefeed.application.services.task_runner import FailureCallback, SuccessCallback

_logger = logging.getLogger(__name__)


class FetchSignals(QObject):
    succeeded = Signal(int, object)
    failed = Signal(int, object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)


class FetchWorker(QRunnable):
    """Background worker that runs a single blocking job."""

    def __init__(self, ticket: int, job: Callable[[], Any], signals: FetchSignals) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._ticket = ticket
        self._job = job
        self._signals = signals

    def run(self) -> None:  # pragma: no cover - runs in background thread
        try:
            result = self._job()
        except Exception as exc:
            self._signals.failed.emit(self._ticket, exc)
            return
        self._signals.succeeded.emit(self._ticket, result)


class QtTaskRunner(QObject):
    """Run jobs on a thread pool and deliver callbacks on the owning thread.

    The relay signals belong to this object, which lives on the UI thread,
    so Qt queues every emission from a worker back onto the UI event loop.
    """

    def __init__(self, pool: Optional[QThreadPool] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._signals = FetchSignals(self)
        self._signals.succeeded.connect(self._on_succeeded)
        self._signals.failed.connect(self._on_failed)
        self._pending: Dict[int, Tuple[SuccessCallback, FailureCallback]] = {}
        self._next_ticket = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit(
        self,
        job: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        self._next_ticket += 1
        ticket = self._next_ticket
        self._pending[ticket] = (on_success, on_failure)
        self._pool.start(FetchWorker(ticket, job, self._signals))

    @Slot(int, object)
    def _on_succeeded(self, ticket: int, result: object) -> None:
        callbacks = self._pending.pop(ticket, None)
        if callbacks is None:
            _logger.warning("Result for unknown ticket %d", ticket)
            return
        callbacks[0](result)

    @Slot(int, object)
    def _on_failed(self, ticket: int, exc: object) -> None:
        callbacks = self._pending.pop(ticket, None)
        if callbacks is None:
            _logger.warning("Failure for unknown ticket %d", ticket)
            return
        callbacks[1](exc)
