"""Reusable Qt widgets for the CineFeed GUI."""

from .feed_view import FeedView
from .flow_layout import CardFlowLayout
from .movie_card import MovieCard
from .scroll_sentinel import ScrollSentinelBinder
from .search_header import SearchHeader
from .trailer_dialog import TrailerDialog

__all__ = [
    "CardFlowLayout",
    "FeedView",
    "MovieCard",
    "ScrollSentinelBinder",
    "SearchHeader",
    "TrailerDialog",
]
