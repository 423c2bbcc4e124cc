"""Tests for the headless visibility sentinel."""

import pytest

from cinefeed.gui.viewmodels.visibility_sentinel import VisibilitySentinel, visible_fraction

VIEWPORT = (0, 0, 400, 300)


class TestVisibleFraction:
    def test_fully_inside(self):
        assert visible_fraction((10, 10, 50, 20), VIEWPORT) == 1.0

    def test_fully_outside(self):
        assert visible_fraction((10, 400, 50, 20), VIEWPORT) == 0.0

    def test_partially_clipped(self):
        assert visible_fraction((0, 290, 100, 20), VIEWPORT) == pytest.approx(0.5)

    def test_degenerate_marker(self):
        assert visible_fraction((0, 0, 0, 20), VIEWPORT) == 0.0


class TestVisibilitySentinel:
    def test_rejects_invalid_threshold(self):
        with pytest.raises(ValueError):
            VisibilitySentinel(threshold=0.0)
        with pytest.raises(ValueError):
            VisibilitySentinel(threshold=1.5)

    def test_enter_fires_once_per_transition(self):
        sentinel = VisibilitySentinel()
        entered = []
        sentinel.entered.connect(lambda: entered.append(True))

        sentinel.update((0, 500, 100, 20), VIEWPORT)
        sentinel.update((0, 280, 100, 20), VIEWPORT)
        sentinel.update((0, 250, 100, 20), VIEWPORT)
        sentinel.update((0, 200, 100, 20), VIEWPORT)

        assert entered == [True]
        assert sentinel.visible.value is True

    def test_full_threshold_requires_whole_marker(self):
        sentinel = VisibilitySentinel(threshold=1.0)

        assert sentinel.update((0, 290, 100, 20), VIEWPORT) is False
        assert sentinel.last_fraction == pytest.approx(0.5)

    def test_partial_threshold(self):
        sentinel = VisibilitySentinel(threshold=0.5)

        assert sentinel.update((0, 290, 100, 20), VIEWPORT) is True

    def test_leave_then_reenter_fires_again(self):
        sentinel = VisibilitySentinel()
        entered, left = [], []
        sentinel.entered.connect(lambda: entered.append(True))
        sentinel.left.connect(lambda: left.append(True))

        sentinel.update((0, 100, 100, 20), VIEWPORT)
        sentinel.update((0, 600, 100, 20), VIEWPORT)
        sentinel.update((0, 100, 100, 20), VIEWPORT)

        assert len(entered) == 2
        assert len(left) == 1

    def test_reset_allows_marker_still_in_view_to_fire(self):
        sentinel = VisibilitySentinel()
        entered = []
        sentinel.entered.connect(lambda: entered.append(True))

        sentinel.update((0, 100, 100, 20), VIEWPORT)
        sentinel.reset()
        sentinel.update((0, 100, 100, 20), VIEWPORT)

        assert len(entered) == 2

    def test_absent_marker_never_fires(self):
        sentinel = VisibilitySentinel()
        entered = []
        sentinel.entered.connect(lambda: entered.append(True))

        sentinel.set_marker_present(False)
        assert sentinel.update((0, 100, 100, 20), VIEWPORT) is False

        assert entered == []
        assert sentinel.last_fraction is None

    def test_hiding_marker_drops_visibility(self):
        sentinel = VisibilitySentinel()
        sentinel.update((0, 100, 100, 20), VIEWPORT)

        sentinel.set_marker_present(False)

        assert sentinel.visible.value is False
        assert sentinel.marker_present is False
