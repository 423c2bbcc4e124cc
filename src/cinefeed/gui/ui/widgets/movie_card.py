"""Card widget presenting a single catalog item."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from cinefeed.config import CARD_HEIGHT, CARD_WIDTH
from cinefeed.domain.models import Item


class MovieCard(QFrame):
    """Title, year, rating and overview with trailer/star/watch-later actions."""

    trailerRequested = Signal(object)
    starToggled = Signal(object)
    watchLaterToggled = Signal(object)

    def __init__(
        self,
        item: Item,
        parent: QWidget | None = None,
        *,
        starred: bool = False,
        watch_later: bool = False,
    ) -> None:
        super().__init__(parent)
        self._item = item
        self.setObjectName("movieCard")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setFixedSize(CARD_WIDTH, CARD_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self.title_label = QLabel(item.title or f"#{item.id}", self)
        self.title_label.setObjectName("movieTitle")
        self.title_label.setWordWrap(True)
        font = self.title_label.font()
        font.setBold(True)
        self.title_label.setFont(font)
        layout.addWidget(self.title_label)

        self.meta_label = QLabel(self._meta_text(item), self)
        self.meta_label.setObjectName("movieMeta")
        layout.addWidget(self.meta_label)

        self.overview_label = QLabel(item.overview, self)
        self.overview_label.setWordWrap(True)
        self.overview_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.overview_label.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Expanding)
        layout.addWidget(self.overview_label, 1)

        actions = QHBoxLayout()
        actions.setSpacing(4)

        self.star_button = QToolButton(self)
        self.star_button.setCheckable(True)
        self.star_button.setAutoRaise(True)
        self.star_button.clicked.connect(lambda: self.starToggled.emit(self._item))
        actions.addWidget(self.star_button)

        self.watch_later_button = QToolButton(self)
        self.watch_later_button.setCheckable(True)
        self.watch_later_button.setAutoRaise(True)
        self.watch_later_button.clicked.connect(lambda: self.watchLaterToggled.emit(self._item))
        actions.addWidget(self.watch_later_button)

        actions.addStretch(1)

        self.trailer_button = QPushButton("View trailer", self)
        self.trailer_button.setObjectName("viewTrailerButton")
        self.trailer_button.clicked.connect(lambda: self.trailerRequested.emit(self._item))
        actions.addWidget(self.trailer_button)

        layout.addLayout(actions)
        self.set_starred(starred)
        self.set_watch_later(watch_later)

    @property
    def item(self) -> Item:
        return self._item

    def set_starred(self, starred: bool) -> None:
        self.star_button.setChecked(starred)
        self.star_button.setText("★" if starred else "☆")
        self.star_button.setToolTip("Remove from starred" if starred else "Star")

    def set_watch_later(self, queued: bool) -> None:
        self.watch_later_button.setChecked(queued)
        self.watch_later_button.setText("✓ Later" if queued else "+ Later")
        self.watch_later_button.setToolTip(
            "Remove from watch later" if queued else "Add to watch later"
        )

    @staticmethod
    def _meta_text(item: Item) -> str:
        parts = []
        if item.release_date:
            parts.append(item.release_date[:4])
        if item.vote_average is not None:
            parts.append(f"★ {item.vote_average:.1f}")
        return " · ".join(parts)
