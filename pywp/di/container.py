from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from pywp.domain.interfaces import IFileService, ISettingsService
from pywp.services.config.app_config import AppConfig, build_app_config
from pywp.services.document_session import DocumentSession
from pywp.services.file_service import FileService
from pywp.services.settings_service import SettingsService
from pywp.services.ui.adapters import (
    QtBrowserService,
    QtFileDialogService,
    QtInputDialogService,
    QtMessageService,
)
from pywp.services.ui.main_window import MainWindow
from pywp.services.ui.ports import (
    IBrowserService,
    IFileDialogService,
    IInputDialogService,
    IMessageService,
)
from pywp.services.ui.presenters import MainPresenter
from pywp.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the main window with its document session and presenter
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        inputs: IInputDialogService | None = None,
        messages: IMessageService | None = None,
        browser: IBrowserService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService(
            encoding=self.config.document_encoding()
        )
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

        # UI ports (Qt-backed adapters by default)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.inputs: IInputDialogService = inputs or QtInputDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.browser: IBrowserService = browser or QtBrowserService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings)

    # ---------- Factories ----------

    def build_session(self) -> DocumentSession:
        return DocumentSession(self.file_service, escape_links=self.config.escape_links())

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, bind a fresh document session to its editor, attach the presenter."""
        window = MainWindow(settings=self.settings_service, app_title=app_title)

        session = self.build_session()
        session.attach_surface(window.surface)

        presenter = MainPresenter(
            view=window,
            session=session,
            dialogs=self.dialogs,
            inputs=self.inputs,
            messages=self.messages,
            browser=self.browser,
            settings=self.settings_service,
            default_filename=self.config.default_filename(),
            app_version=self.config.get_version(),
        )
        window.attach_presenter(presenter)

        if start_path:
            presenter.open_path(start_path)

        return window
