"""Default configuration values for CineFeed."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Content provider
# ---------------------------------------------------------------------------

API_BASE_URL: Final[str] = "https://api.themoviedb.org/3"
API_KEY_ENV_VAR: Final[str] = "TMDB_API_KEY"
API_LANGUAGE: Final[str] = "en-US"
DISCOVER_SORT_BY: Final[str] = "popularity.desc"

# Timeouts surface as ``NetworkFailure``; nothing is retried.
REQUEST_TIMEOUT_SEC: Final[float] = 10.0

YOUTUBE_WATCH_URL: Final[str] = "https://www.youtube.com/watch?v={key}"

# Video type preferred by the trailer resolver before falling back to the
# first available video.
TRAILER_VIDEO_TYPE: Final[str] = "Trailer"

# ---------------------------------------------------------------------------
# Feed behaviour
# ---------------------------------------------------------------------------

# Fraction of the trailing marker that must be visible before the next page
# is requested.  1.0 means fully visible.
SENTINEL_THRESHOLD: Final[float] = 1.0

# ---------------------------------------------------------------------------
# UI constants
# ---------------------------------------------------------------------------

CARD_WIDTH: Final[int] = 200
CARD_HEIGHT: Final[int] = 320
GRID_SPACING: Final[int] = 12
WINDOW_DEFAULT_SIZE: Final[tuple[int, int]] = (1100, 760)

FEED_LOADING_TEXT: Final[str] = "Loading Movies..."
FEED_LOADING_MORE_TEXT: Final[str] = "Loading more movies..."
FEED_ERROR_TEXT: Final[str] = "Failed to fetch movies. Please try again later."
NO_TRAILER_TEXT: Final[str] = "No trailer available."
