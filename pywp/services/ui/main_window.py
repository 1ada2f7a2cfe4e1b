from __future__ import annotations

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow, QStatusBar

from pywp.domain.interfaces import ISettingsService
from pywp.services.ui.adapters.qt_rich_text import QtRichTextSurface
from pywp.services.ui.presenters.main_presenter import MainPresenter
from pywp.services.ui.rich_text_edit import LinkAwareTextEdit
from pywp.utils.constants import APP_NAME


class MainWindow(QMainWindow):
    """Thin PyQt window; every command is forwarded to the attached presenter."""

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 700)

        self.settings = settings
        self.presenter: MainPresenter | None = None

        # Widgets
        self.editor = LinkAwareTextEdit(self)
        self.surface = QtRichTextSurface(self.editor)
        self.setCentralWidget(self.editor)

        # UI
        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter
        self.editor.textChanged.connect(presenter.on_editor_changed)
        self.editor.linkActivated.connect(presenter.open_link)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.exit_action = QAction("E&xit", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.setStatusTip("Exit application")
        self.exit_action.triggered.connect(QApplication.instance().quit)

        # File actions
        self.act_new = QAction(
            "&New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "&Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "&Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save &As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )

        # Format actions
        self.act_heading = QAction("Insert &Heading", self, triggered=self._insert_heading)
        self.act_link = QAction(
            "Insert &Link…", self, shortcut="Ctrl+K", triggered=self._insert_link
        )

        self.act_about = QAction("&About", self, triggered=self._about)

    def _build_menu(self):
        m = self.menuBar()
        filem = self.file_menu = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.exit_action)

        formatm = self.format_menu = m.addMenu("Fo&rmat")
        formatm.addAction(self.act_heading)
        formatm.addAction(self.act_link)

        helpm = self.help_menu = m.addMenu("&Help")
        helpm.addAction(self.act_about)

    # ---------- Actions ----------
    def _new_file(self):
        if self.presenter:
            self.presenter.new_document()

    def _open_dialog(self):
        if self.presenter:
            self.presenter.open_via_dialog()

    def _save(self):
        if self.presenter:
            self.presenter.save()

    def _save_as(self):
        if self.presenter:
            self.presenter.save_as()

    def _insert_heading(self):
        if self.presenter:
            self.presenter.insert_heading()

    def _insert_link(self):
        if self.presenter:
            self.presenter.insert_link()

    def _about(self):
        if self.presenter:
            self.presenter.show_about()

    # ---------- IMainView ----------
    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
