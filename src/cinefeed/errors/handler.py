import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from cinefeed.errors import FetchError
from cinefeed.events.bus import Event, EventBus

UiCallback = Callable[[str, "ErrorSeverity"], None]


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def notifies_ui(self) -> bool:
        return self in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)


def severity_for(error: Exception) -> ErrorSeverity:
    """Expected fetch failures are errors; anything else is a bug."""
    return ErrorSeverity.ERROR if isinstance(error, FetchError) else ErrorSeverity.CRITICAL


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    """Log a failure, announce it on the bus and forward serious ones to the UI."""

    def __init__(self, logger: logging.Logger, event_bus: EventBus):
        self._logger = logger
        self._events = event_bus
        self._ui_callback: Optional[UiCallback] = None

    def register_ui_callback(self, callback: UiCallback):
        self._ui_callback = callback

    def handle(
        self,
        error: Exception,
        severity: Optional[ErrorSeverity] = None,
        context: Optional[dict] = None,
    ) -> ErrorOccurredEvent:
        severity = severity or severity_for(error)
        context = dict(context or {})
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method("%s: %s", error.__class__.__name__, error, extra={"context": context})

        event = ErrorOccurredEvent(error=error, severity=severity, context=context)
        self._events.publish(event)

        if self._ui_callback is not None and severity.notifies_ui:
            self._ui_callback(str(error), severity)
        return event
