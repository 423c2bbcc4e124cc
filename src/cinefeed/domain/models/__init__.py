from .core import FeedPhase, FeedState, FetchStatus, Item, ResultBatch, Video
from .query import Query

__all__ = [
    "FeedPhase",
    "FeedState",
    "FetchStatus",
    "Item",
    "Query",
    "ResultBatch",
    "Video",
]
