"""Header row with the home button, search box and starred counter."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QSizePolicy,
    QToolButton,
    QWidget,
)


class SearchHeader(QWidget):
    """Emit ``searchRequested`` on every edit and ``homeRequested`` on home."""

    searchRequested = Signal(str)
    homeRequested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("searchHeader")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(10)

        self.home_button = QToolButton(self)
        self.home_button.setObjectName("homeButton")
        self.home_button.setText("🎬 CineFeed")
        self.home_button.setAutoRaise(True)
        self.home_button.clicked.connect(self._on_home_clicked)
        layout.addWidget(self.home_button)

        self.starred_label = QLabel(self)
        self.starred_label.setObjectName("starredCount")
        layout.addWidget(self.starred_label)

        layout.addStretch(1)

        self.search_edit = QLineEdit(self)
        self.search_edit.setObjectName("searchMovies")
        self.search_edit.setPlaceholderText("Search movies...")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.setMinimumWidth(280)
        self.search_edit.textEdited.connect(self.searchRequested.emit)
        layout.addWidget(self.search_edit)

        self.set_starred_count(0)

    def set_search_text(self, text: str) -> None:
        if self.search_edit.text() != text:
            self.search_edit.setText(text)

    def set_starred_count(self, count: int) -> None:
        self.starred_label.setText(f"★ {count}" if count > 0 else "☆")

    def _on_home_clicked(self) -> None:
        self.search_edit.clear()
        self.homeRequested.emit()
