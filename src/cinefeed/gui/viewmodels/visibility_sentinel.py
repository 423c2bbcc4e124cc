"""Headless viewport-visibility detector for the feed's trailing marker.

Geometry is supplied by the view layer as ``(x, y, width, height)`` tuples in
a common coordinate space, keeping this class testable without Qt.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from cinefeed.config import SENTINEL_THRESHOLD
from cinefeed.gui.viewmodels.signal import ObservableProperty, Signal

Rect = Tuple[int, int, int, int]

_logger = logging.getLogger(__name__)


def visible_fraction(marker: Rect, viewport: Rect) -> float:
    """Return the share of *marker*'s area lying inside *viewport*."""

    mx, my, mw, mh = marker
    vx, vy, vw, vh = viewport
    area = mw * mh
    if area <= 0:
        return 0.0
    overlap_w = min(mx + mw, vx + vw) - max(mx, vx)
    overlap_h = min(my + mh, vy + vh) - max(my, vy)
    if overlap_w <= 0 or overlap_h <= 0:
        return 0.0
    return (overlap_w * overlap_h) / area


class VisibilitySentinel:
    """Emit ``entered`` once per transition of the marker into view."""

    def __init__(self, threshold: float = SENTINEL_THRESHOLD) -> None:
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"threshold must be in (0, 1], got {threshold}")
        self._threshold = threshold
        self._marker_present = True
        self._last_fraction: Optional[float] = None

        self.visible = ObservableProperty(False, "visible")
        self.entered = Signal("entered")
        self.left = Signal("left")

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def marker_present(self) -> bool:
        return self._marker_present

    @property
    def last_fraction(self) -> Optional[float]:
        return self._last_fraction

    def set_marker_present(self, present: bool) -> None:
        """Declare whether the marker is rendered at all.

        A missing marker can never become visible, which is how pagination
        stops once the feed is exhausted.
        """
        self._marker_present = present
        if not present:
            self._last_fraction = None
            self._set_visible(False)

    def update(self, marker: Rect, viewport: Rect) -> bool:
        """Recompute visibility from fresh geometry and return it."""
        if not self._marker_present:
            return False
        fraction = visible_fraction(marker, viewport)
        self._last_fraction = fraction
        self._set_visible(fraction >= self._threshold)
        return self.visible.value

    def reset(self) -> None:
        """Forget the current edge so the next qualifying update fires again."""
        self._last_fraction = None
        self._set_visible(False)

    def _set_visible(self, visible: bool) -> None:
        if visible == self.visible.value:
            return
        self.visible.value = visible
        if visible:
            _logger.debug("Sentinel entered view (fraction=%s)", self._last_fraction)
            self.entered.emit()
        else:
            self.left.emit()
