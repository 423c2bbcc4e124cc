"""GUI entry point for the CineFeed desktop application."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from cinefeed.appctx import AppContext
from cinefeed.domain.models import Query
from cinefeed.gui.ui.main_window import MainWindow
from cinefeed.gui.ui.tasks.fetch_worker import QtTaskRunner


def main(argv: list[str] | None = None) -> int:
    """Launch the Qt application and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(arguments)
    app.setApplicationName("CineFeed")

    runner = QtTaskRunner(parent=app)
    context = AppContext.create(runner)
    window = MainWindow(context)
    window.show()
    # Allow starting on a search directly via argv[1].
    window.start(Query.from_text(arguments[1] if len(arguments) > 1 else ""))
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
