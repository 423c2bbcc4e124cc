"""Main window composing the header, the feed and the trailer overlay."""

from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget

from cinefeed.appctx import AppContext
from cinefeed.config import WINDOW_DEFAULT_SIZE
from cinefeed.domain.models import Query
from cinefeed.errors.handler import ErrorSeverity

from .widgets.feed_view import FeedView
from .widgets.search_header import SearchHeader
from .widgets.trailer_dialog import TrailerDialog


class MainWindow(QMainWindow):
    """Top-level window for the catalog browser."""

    def __init__(self, context: AppContext) -> None:
        super().__init__()
        self._context = context
        self.setWindowTitle("CineFeed")
        self.resize(*WINDOW_DEFAULT_SIZE)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = SearchHeader(central)
        layout.addWidget(self.header)

        self.feed_view = FeedView(context.feed, context.sentinel, context.collections, central)
        layout.addWidget(self.feed_view, 1)
        self.setCentralWidget(central)

        self.trailer_dialog = TrailerDialog(context.trailer, self)

        self.header.searchRequested.connect(context.search.search)
        self.header.homeRequested.connect(context.search.go_home)
        self.feed_view.trailerRequested.connect(context.trailer.view_trailer)
        context.collections.starred.changed.connect(
            lambda items, _old: self.header.set_starred_count(len(items))
        )
        self.header.set_starred_count(context.collections.starred_count())
        context.error_handler.register_ui_callback(self._on_error)

    def start(self, query: Query | None = None) -> None:
        """Mount the feed and request the first page."""

        query = query or Query()
        self.header.set_search_text(query.text)
        self._context.feed.attach(query)

    def _on_error(self, message: str, severity: ErrorSeverity) -> None:
        # Feed failures already render an inline notice.
        if severity == ErrorSeverity.CRITICAL:
            QMessageBox.critical(self, "CineFeed", message)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._context.dispose()
        super().closeEvent(event)
