"""Feed a :class:`VisibilitySentinel` with geometry from a scroll area."""

from __future__ import annotations

from PySide6.QtCore import QCoreApplication, QEvent, QObject, QPoint, QTimer
from PySide6.QtWidgets import QScrollArea, QWidget

from cinefeed.gui.viewmodels.visibility_sentinel import Rect, VisibilitySentinel


class ScrollSentinelBinder(QObject):
    """Recompute marker visibility whenever the scroll position or size changes."""

    def __init__(
        self,
        scroll_area: QScrollArea,
        marker: QWidget,
        sentinel: VisibilitySentinel,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent or scroll_area)
        self._scroll_area = scroll_area
        self._marker = marker
        self._sentinel = sentinel

        self._scroll_area.verticalScrollBar().valueChanged.connect(self.schedule_check)
        self._scroll_area.verticalScrollBar().rangeChanged.connect(self.schedule_check)
        self._scroll_area.viewport().installEventFilter(self)
        self._marker.installEventFilter(self)

    @property
    def sentinel(self) -> VisibilitySentinel:
        return self._sentinel

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if event.type() in (QEvent.Type.Resize, QEvent.Type.Show, QEvent.Type.Move):
            self.schedule_check()
        elif watched is self._marker and event.type() == QEvent.Type.Hide:
            self._sentinel.set_marker_present(False)
        return super().eventFilter(watched, event)

    def schedule_check(self, *_args: object) -> None:
        # Measure on the next turn, once the model change that caused it is complete.
        QTimer.singleShot(0, self.check)

    def check(self, *_args: object) -> None:
        if not self._marker.isVisible():
            self._sentinel.set_marker_present(False)
            return
        self.settle_geometry()
        self._sentinel.set_marker_present(True)
        self._sentinel.update(self.marker_rect(), self.viewport_rect())

    def marker_rect(self) -> Rect:
        origin = self._marker.mapTo(self._scroll_area.viewport(), QPoint(0, 0))
        return (origin.x(), origin.y(), self._marker.width(), self._marker.height())

    def viewport_rect(self) -> Rect:
        viewport = self._scroll_area.viewport()
        return (0, 0, viewport.width(), viewport.height())

    def settle_geometry(self) -> None:
        """Apply pending layout changes so the marker sits at its final position."""
        container = self._scroll_area.widget()
        if container is None:
            return
        # Inner layouts first: each one that changes invalidates its parent.
        for child in container.findChildren(QWidget):
            if child.layout() is not None:
                child.layout().activate()
        layout = container.layout()
        if layout is not None:
            layout.activate()
        # QScrollArea resizes a resizable widget and updates its range on LayoutRequest.
        QCoreApplication.sendEvent(self._scroll_area, QEvent(QEvent.Type.LayoutRequest))
