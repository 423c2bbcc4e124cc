from .result_store import ResultStore, StoreSnapshot
from .task_runner import InlineTaskRunner, TaskRunner
from .trailer_resolver import TrailerResolver, select_trailer_key

__all__ = [
    "InlineTaskRunner",
    "ResultStore",
    "StoreSnapshot",
    "TaskRunner",
    "TrailerResolver",
    "select_trailer_key",
]
