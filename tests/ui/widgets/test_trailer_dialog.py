from __future__ import annotations

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for widget tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from cinefeed.application.services.trailer_resolver import TrailerResolver
from cinefeed.config import NO_TRAILER_TEXT
from cinefeed.domain.models import Item, Video
from cinefeed.gui.ui.widgets.trailer_dialog import TrailerDialog
from cinefeed.gui.viewmodels.trailer_viewmodel import TrailerViewModel


@pytest.fixture
def dialog(qtbot, client, runner, bus):
    vm = TrailerViewModel(TrailerResolver(client), runner, bus)
    widget = TrailerDialog(vm)
    qtbot.addWidget(widget)
    return widget, vm


def test_dialog_offers_trailer(dialog, client, runner):
    widget, vm = dialog
    client.videos[603] = [Video(key="abc", type="Trailer")]

    vm.view_trailer(Item(id=603, title="The Matrix"))
    runner.run_all()

    assert widget.isVisible()
    assert widget.title_label.text() == "The Matrix"
    assert not widget.open_button.isHidden()
    assert widget.notice_label.isHidden()


def test_dialog_shows_notice_without_trailer(dialog, client, runner):
    widget, vm = dialog
    client.videos[1] = []

    vm.view_trailer(Item(id=1, title="Obscure"))
    runner.run_all()

    assert widget.notice_label.text() == NO_TRAILER_TEXT
    assert not widget.notice_label.isHidden()
    assert widget.open_button.isHidden()


def test_closing_viewmodel_hides_dialog(dialog, client, runner):
    widget, vm = dialog

    vm.view_trailer(Item(id=2, title="Heat"))
    runner.run_all()
    vm.close()

    assert not widget.isVisible()
    assert vm.is_open.value is False


def test_rejecting_dialog_closes_viewmodel(dialog, client, runner):
    widget, vm = dialog

    vm.view_trailer(Item(id=3, title="Up"))
    runner.run_all()
    widget.reject()

    assert vm.is_open.value is False
