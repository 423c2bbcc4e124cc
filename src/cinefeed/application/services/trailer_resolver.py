"""Pick a playable trailer key for a selected item."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from cinefeed.config import TRAILER_VIDEO_TYPE
from cinefeed.domain.models import Item, Video
from cinefeed.errors import FetchError
from cinefeed.errors.handler import ErrorHandler, ErrorSeverity
from cinefeed.infrastructure.content_api import ContentApiClient

LOGGER = logging.getLogger(__name__)


def select_trailer_key(videos: Sequence[Video], preferred_type: str = TRAILER_VIDEO_TYPE) -> Optional[str]:
    """Return the key of the first *preferred_type* video, else the first video."""

    if not videos:
        return None
    for video in videos:
        if video.type == preferred_type:
            return video.key
    return videos[0].key


class TrailerResolver:
    """Fetch an item's detail payload and extract its trailer key.

    Results are never cached; each call performs a fresh request.  Fetch
    failures are reported and collapse to ``None``.
    """

    def __init__(self, client: ContentApiClient, error_handler: Optional[ErrorHandler] = None) -> None:
        self._client = client
        self._error_handler = error_handler

    def resolve(self, item: Item) -> Optional[str]:
        try:
            videos = self._client.fetch_videos(item.id)
        except FetchError as exc:
            if self._error_handler is not None:
                self._error_handler.handle(exc, ErrorSeverity.WARNING, {"item_id": item.id})
            else:
                LOGGER.warning("Error fetching movie details for %s: %s", item.id, exc)
            return None
        key = select_trailer_key(videos)
        LOGGER.debug("Resolved trailer for %s: %s", item.id, key)
        return key


__all__ = ["TrailerResolver", "select_trailer_key"]
