"""Pure Python signal system, no Qt dependency.

View models publish state through ``ObservableProperty`` and notifications
through ``Signal``.  Widgets connect to both, so the view models stay
importable (and testable) without a ``QApplication``.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Ordered list of callbacks.

    Connecting the same callable twice is a no-op.  A handler that raises is
    logged under the signal's *name* and the remaining handlers still run.
    """

    def __init__(self, name: str = "signal") -> None:
        self.name = name
        self._handlers: list[Callable] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"<Signal {self.name} handlers={self.handler_count}>"

    def connect(self, handler: Callable) -> None:
        with self._lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> None:
        """Remove *handler*; raises ``ValueError`` when it is not connected."""
        with self._lock:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        with self._lock:
            handlers = tuple(self._handlers)
        for handler in handlers:
            try:
                handler(*args)
            except Exception:
                _logger.exception("Handler %r of %s failed", handler, self.name)

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._handlers)


class ObservableProperty:
    """Value holder whose ``changed`` signal emits ``(new, old)``.

    Assigning a value equal to the current one is silent.
    """

    def __init__(self, initial_value: Any = None, name: str = "property") -> None:
        self._value = initial_value
        self.changed = Signal(f"{name}.changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self.set(new_value)

    def set(self, new_value: Any) -> bool:
        """Store *new_value* and return whether anything changed."""
        if self._value == new_value:
            return False
        old_value, self._value = self._value, new_value
        self.changed.emit(new_value, old_value)
        return True
