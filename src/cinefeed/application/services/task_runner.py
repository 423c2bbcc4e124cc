"""Execution seam between view models and blocking network calls.

View models never call the network directly; they hand a callable to a
``TaskRunner`` together with success/failure callbacks.  Implementations
must invoke the callbacks on the thread that owns the view models (the UI
thread in the desktop app).
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[Exception], None]


class TaskRunner(Protocol):
    def submit(
        self,
        job: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None: ...


class InlineTaskRunner:
    """Run jobs synchronously on the calling thread (CLI and scripting)."""

    def submit(
        self,
        job: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        try:
            result = job()
        except Exception as exc:
            on_failure(exc)
            return
        on_success(result)


__all__ = ["FailureCallback", "InlineTaskRunner", "SuccessCallback", "TaskRunner"]
