"""Background tasks and workers."""

from __future__ import annotations

from .fetch_worker import FetchSignals, FetchWorker, QtTaskRunner

__all__ = [
    "FetchSignals",
    "FetchWorker",
    "QtTaskRunner",
]
