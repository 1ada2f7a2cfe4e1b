from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pywp.domain.errors import FragmentInsertError
from pywp.services.file_service import FileService
from pywp.services.settings_service import SettingsService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes ---


class FakeSurface:
    """
    String-backed stand-in for the host document model: markup is stored as-is
    and offsets index straight into it.
    """

    def __init__(self, caret: int = 0) -> None:
        self.text = ""
        self.caret = caret
        self.loads = 0

    def load_markup(self, markup: str) -> None:
        self.text = markup
        self.loads += 1

    def markup(self) -> str:
        return self.text

    def caret_position(self) -> int:
        return self.caret

    def insert_markup(self, offset: int, fragment: str) -> None:
        if offset < 0 or offset > len(self.text):
            raise FragmentInsertError(f"Invalid insertion offset {offset}")
        self.text = self.text[:offset] + fragment + self.text[offset:]


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()
