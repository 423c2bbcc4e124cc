"""Application-wide context shared by the GUI and the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

from .application.services.result_store import ResultStore
from .application.services.task_runner import TaskRunner
from .application.services.trailer_resolver import TrailerResolver
from .errors.handler import ErrorHandler
from .events.bus import EventBus
from .events.feed_events import FeedEvent
from .gui.viewmodels.collections_viewmodel import CollectionsViewModel
from .gui.viewmodels.feed_viewmodel import FeedViewModel
from .gui.viewmodels.search_viewmodel import SearchViewModel
from .gui.viewmodels.trailer_viewmodel import TrailerViewModel
from .gui.viewmodels.visibility_sentinel import VisibilitySentinel
from .infrastructure.content_api import ContentApiClient

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .settings.manager import SettingsManager

LOGGER = logging.getLogger("cinefeed")


def _trace_event(event: FeedEvent) -> None:
    LOGGER.debug("%s from %s", type(event).__name__, event.source or "?")


def _create_settings_manager() -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager()
    manager.load()
    return manager


@dataclass
class AppContext:
    """Container object wiring the feed engine's collaborators together."""

    settings: Any
    event_bus: EventBus
    error_handler: ErrorHandler
    client: ContentApiClient
    runner: TaskRunner
    result_store: ResultStore
    trailer_resolver: TrailerResolver
    feed: FeedViewModel
    search: SearchViewModel
    trailer: TrailerViewModel
    sentinel: VisibilitySentinel
    collections: CollectionsViewModel

    @classmethod
    def create(
        cls,
        runner: TaskRunner,
        *,
        settings: Optional[Any] = None,
        client: Optional[ContentApiClient] = None,
    ) -> "AppContext":
        """Build a context around *runner*, loading settings when not given."""

        settings = settings if settings is not None else _create_settings_manager()
        event_bus = EventBus()
        event_bus.subscribe(FeedEvent, _trace_event)
        error_handler = ErrorHandler(LOGGER, event_bus)
        if client is None:
            client = ContentApiClient(
                settings.api_key(),
                base_url=settings.get("api.base_url"),
                language=settings.get("api.language"),
                timeout=float(settings.get("api.timeout_sec")),
            )
        store = ResultStore(client, runner, event_bus, error_handler)
        resolver = TrailerResolver(client, error_handler)
        feed = FeedViewModel(
            client,
            runner,
            event_bus,
            store,
            error_handler=error_handler,
            deduplicate=bool(settings.get("feed.deduplicate", False)),
        )
        return cls(
            settings=settings,
            event_bus=event_bus,
            error_handler=error_handler,
            client=client,
            runner=runner,
            result_store=store,
            trailer_resolver=resolver,
            feed=feed,
            search=SearchViewModel(store),
            trailer=TrailerViewModel(resolver, runner, event_bus),
            sentinel=VisibilitySentinel(float(settings.get("feed.sentinel_threshold", 1.0))),
            collections=CollectionsViewModel(settings),
        )

    def dispose(self) -> None:
        for viewmodel in (self.feed, self.search, self.trailer, self.collections):
            viewmodel.dispose()
        self.client.close()
