"""HTTP client for the TMDB v3 content API.

Only three request shapes are used by the application: a discover page, a
search page and a movie detail payload with embedded videos.  Every failure
is mapped onto :class:`NetworkFailure` or :class:`DecodeFailure` so callers
can treat them uniformly.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from cinefeed.config import (
    API_BASE_URL,
    API_KEY_ENV_VAR,
    API_LANGUAGE,
    DISCOVER_SORT_BY,
    REQUEST_TIMEOUT_SEC,
)
from cinefeed.domain.models import Item, Query, ResultBatch, Video
from cinefeed.errors import DecodeFailure, NetworkFailure

LOGGER = logging.getLogger(__name__)


class ContentApiClient:
    """Thin wrapper around a :class:`requests.Session`."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = API_BASE_URL,
        language: str = API_LANGUAGE,
        timeout: float = REQUEST_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key or os.environ.get(API_KEY_ENV_VAR) or ""
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._timeout = timeout
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fetch_page(self, query: Query, page: int) -> ResultBatch:
        """Return one page of results for *query* (search or discover)."""

        if page < 1:
            raise ValueError(f"page must be positive, got {page}")
        if query.is_discover:
            payload = self._get_json(
                "/discover/movie", {"page": page, "sort_by": DISCOVER_SORT_BY}
            )
        else:
            payload = self._get_json("/search/movie", {"query": query.text, "page": page})
        return parse_result_batch(payload)

    def fetch_videos(self, item_id: int) -> List[Video]:
        """Return the videos attached to the movie *item_id*."""

        payload = self._get_json(f"/movie/{item_id}", {"append_to_response": "videos"})
        return parse_videos(payload)

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self._base_url}{path}"
        merged = {"api_key": self._api_key, "language": self._language}
        merged.update(params)
        LOGGER.debug("GET %s page=%s", path, params.get("page"))
        try:
            response = self._session.get(url, params=merged, timeout=self._timeout)
        except requests.RequestException as exc:
            raise NetworkFailure(f"Request to {path} failed: {exc}") from exc
        if not response.ok:
            raise NetworkFailure(
                f"{path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeFailure(f"{path} returned malformed JSON") from exc


def parse_result_batch(payload: Any) -> ResultBatch:
    """Convert a ``{results, total_results}`` payload into a batch.

    A payload without ``results`` is an empty, terminal batch.
    """

    if not isinstance(payload, dict):
        raise DecodeFailure(f"Expected a JSON object, got {type(payload).__name__}")
    results = payload.get("results")
    if results is None:
        return ResultBatch(items=[], total_available=0)
    if not isinstance(results, list):
        raise DecodeFailure("'results' is not a list")
    total = payload.get("total_results") or 0
    if not isinstance(total, int) or isinstance(total, bool):
        raise DecodeFailure(f"'total_results' is not an integer: {total!r}")
    return ResultBatch(items=[Item.from_payload(entry) for entry in results], total_available=total)


def parse_videos(payload: Any) -> List[Video]:
    try:
        entries = payload["videos"]["results"]
    except (KeyError, TypeError) as exc:
        raise DecodeFailure("Detail payload has no videos.results") from exc
    if not isinstance(entries, list):
        raise DecodeFailure("videos.results is not a list")
    videos: List[Video] = []
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("key"):
            continue
        videos.append(
            Video(
                key=str(entry["key"]),
                type=entry.get("type") or "",
                site=entry.get("site") or "",
                name=entry.get("name") or "",
            )
        )
    return videos


__all__ = ["ContentApiClient", "parse_result_batch", "parse_videos"]
