"""Wrapping grid layout for fixed-size movie cards."""

from __future__ import annotations

from PySide6.QtCore import QRect, QSize, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget


class CardFlowLayout(QLayout):
    """Place cards left to right in rows, centring each row horizontally.

    Cards share one size, so the number of columns is derived from the
    available width and the layout height follows from the item count
    (``heightForWidth``), which lets a resizable scroll area grow with it.
    """

    def __init__(self, parent: QWidget | None = None, spacing: int = 12) -> None:
        super().__init__(parent)
        self.setContentsMargins(0, 0, 0, 0)
        self._gap = spacing
        self._items: list[QLayoutItem] = []

    # QLayout protocol --------------------------------------------------
    def addItem(self, item: QLayoutItem) -> None:  # noqa: N802
        self._items.append(item)
        self.invalidate()

    def count(self) -> int:
        return len(self._items)

    def itemAt(self, index: int) -> QLayoutItem | None:  # noqa: N802
        return self._items[index] if 0 <= index < len(self._items) else None

    def takeAt(self, index: int) -> QLayoutItem | None:  # noqa: N802
        if not 0 <= index < len(self._items):
            return None
        item = self._items.pop(index)
        self.invalidate()
        return item

    def spacing(self) -> int:
        return self._gap

    def expandingDirections(self) -> Qt.Orientation:  # noqa: N802
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:  # noqa: N802
        return True

    def heightForWidth(self, width: int) -> int:  # noqa: N802
        return self._arrange(QRect(0, 0, width, 0), apply=False)

    def setGeometry(self, rect: QRect) -> None:  # noqa: N802
        super().setGeometry(rect)
        self._arrange(rect, apply=True)

    def sizeHint(self) -> QSize:  # noqa: N802
        return self.minimumSize()

    def minimumSize(self) -> QSize:  # noqa: N802
        cell = self._cell_size()
        margins = self.contentsMargins()
        return QSize(
            cell.width() + margins.left() + margins.right(),
            cell.height() + margins.top() + margins.bottom(),
        )

    # Helpers -----------------------------------------------------------
    def clear(self) -> None:
        """Detach every card and schedule it for deletion."""
        while self._items:
            widget = self._items.pop().widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
        self.invalidate()

    def columns_for(self, width: int) -> int:
        cell = self._cell_size()
        margins = self.contentsMargins()
        usable = width - margins.left() - margins.right()
        if cell.width() <= 0:
            return 1
        return max(1, (usable + self._gap) // (cell.width() + self._gap))

    def _cell_size(self) -> QSize:
        if not self._items:
            return QSize(0, 0)
        return self._items[0].sizeHint()

    def _arrange(self, rect: QRect, *, apply: bool) -> int:
        margins = self.contentsMargins()
        if not self._items:
            return margins.top() + margins.bottom()
        cell = self._cell_size()
        columns = self.columns_for(rect.width())
        rows = (len(self._items) + columns - 1) // columns
        row_width = columns * cell.width() + (columns - 1) * self._gap
        usable = rect.width() - margins.left() - margins.right()
        left = rect.x() + margins.left() + max(0, (usable - row_width) // 2)
        top = rect.y() + margins.top()

        if apply:
            for index, item in enumerate(self._items):
                row, column = divmod(index, columns)
                x = left + column * (cell.width() + self._gap)
                y = top + row * (cell.height() + self._gap)
                item.setGeometry(QRect(x, y, cell.width(), cell.height()))

        height = rows * cell.height() + (rows - 1) * self._gap
        return height + margins.top() + margins.bottom()
