"""Modal overlay showing the resolved trailer for the selected movie."""

from __future__ import annotations

from PySide6.QtCore import QUrl, Qt
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout, QWidget

from cinefeed.config import NO_TRAILER_TEXT
from cinefeed.gui.viewmodels.trailer_viewmodel import TrailerViewModel


class TrailerDialog(QDialog):
    """Title plus either an "Open trailer" action or the no-trailer notice."""

    def __init__(self, viewmodel: TrailerViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._viewmodel = viewmodel
        self.setObjectName("trailerDialog")
        self.setModal(True)
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        self.title_label = QLabel(self)
        font = self.title_label.font()
        font.setPointSizeF(font.pointSizeF() * 1.4)
        font.setBold(True)
        self.title_label.setFont(font)
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        self.notice_label = QLabel(NO_TRAILER_TEXT, self)
        self.notice_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.notice_label)

        self.open_button = QPushButton("Open trailer", self)
        self.open_button.setObjectName("openTrailerButton")
        self.open_button.clicked.connect(self._open_trailer)
        layout.addWidget(self.open_button)

        close_button = QPushButton("Close", self)
        close_button.clicked.connect(self.reject)
        layout.addWidget(close_button)

        self.finished.connect(lambda _result: viewmodel.close())
        viewmodel.opened.connect(self._on_opened)
        viewmodel.closed.connect(self._on_closed)

    def _on_opened(self, _item: object, _key: object) -> None:
        self.refresh()
        if not self.isVisible():
            self.open()

    def _on_closed(self) -> None:
        if self.isVisible():
            self.hide()

    def refresh(self) -> None:
        self.setWindowTitle(self._viewmodel.title or "Trailer")
        self.title_label.setText(self._viewmodel.title)
        has_trailer = self._viewmodel.video_url is not None
        self.notice_label.setVisible(not has_trailer)
        self.open_button.setVisible(has_trailer)

    def _open_trailer(self) -> None:
        url = self._viewmodel.video_url
        if url:
            QDesktopServices.openUrl(QUrl(url))
