from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pywp.di.container import Container
from pywp.utils.constants import APP_NAME, APP_ORG
from pywp.utils.logging_setup import setup_logging

log = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.

    The window lives for the whole process; it is owned here rather than
    stored in a module-level global.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default()
    setup_logging(container.config.log_level())
    log.info("Starting %s %s", APP_NAME, container.config.get_version())

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
