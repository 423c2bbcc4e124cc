from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .collections_viewmodel import CollectionsViewModel
from .feed_viewmodel import FeedViewModel
from .search_viewmodel import SearchViewModel
from .trailer_viewmodel import TrailerViewModel
from .visibility_sentinel import VisibilitySentinel, visible_fraction

__all__ = [
    "BaseViewModel",
    "CollectionsViewModel",
    "FeedViewModel",
    "ObservableProperty",
    "SearchViewModel",
    "Signal",
    "TrailerViewModel",
    "VisibilitySentinel",
    "visible_fraction",
]
