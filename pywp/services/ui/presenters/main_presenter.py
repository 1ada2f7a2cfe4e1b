from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from pywp.domain.errors import FragmentInsertError, MalformedUriError
from pywp.domain.interfaces import ISettingsService
from pywp.services.document_session import DocumentSession
from pywp.services.fragments import parse_link_target
from pywp.services.ui.ports.browser import IBrowserService
from pywp.services.ui.ports.dialogs import IFileDialogService, IInputDialogService
from pywp.services.ui.ports.messages import IMessageService
from pywp.utils.constants import APP_NAME, DEFAULT_FILENAME, OPEN_FILTER, SAVE_FILTER

log = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    def set_title(self, title: str) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class MainPresenter:
    """
    Handles every File/Format command of the main window.

    Paths and link inputs come from the dialog ports; failures are caught here,
    logged, and shown as modal messages. The application keeps running after
    any reported failure.
    """

    def __init__(
        self,
        view: IMainView,
        session: DocumentSession,
        dialogs: IFileDialogService,
        inputs: IInputDialogService,
        messages: IMessageService,
        browser: IBrowserService,
        settings: ISettingsService | None = None,
        *,
        default_filename: str = DEFAULT_FILENAME,
        app_version: str = "0.0.0",
    ) -> None:
        self.view = view
        self.session = session
        self.dialogs = dialogs
        self.inputs = inputs
        self.messages = messages
        self.browser = browser
        self.settings = settings
        self.default_filename = default_filename
        self.app_version = app_version

    # ---------- File ----------
    def new_document(self) -> None:
        self.session.new()
        self.view.set_title(f"New document — {APP_NAME}")

    def open_via_dialog(self) -> bool:
        start_dir = self.settings.get_last_dir() if self.settings else None
        path = self.dialogs.get_open_file(self.view, "Open File", start_dir, OPEN_FILTER)
        if path is None:
            return False
        return self.open_path(path)

    def open_path(self, path: Path) -> bool:
        try:
            self.session.open(path)
        except OSError as e:
            log.warning("Open failed for %s: %s", path, e)
            self.messages.error(self.view, "Open Error", f"Failed to open file:\n{e}")
            return False
        self._remember_dir(self.session.file_path)
        self._update_title()
        return True

    def save(self, force_dialog: bool = False) -> bool:
        target: Path | None = None
        if self.session.file_path is None or force_dialog:
            bound = self.session.file_path
            start = str(bound) if bound else self._suggested_path()
            target = self.dialogs.get_save_file(self.view, "Save As", start, SAVE_FILTER)
            if target is None:
                return False

        try:
            path = self.session.save(target)
        except OSError as e:
            log.warning("Save failed for %s: %s", self.session.file_path, e)
            self.messages.error(self.view, "Save Error", f"Failed to save file:\n{e}")
            return False

        self._remember_dir(path)
        self._update_title()
        self.view.show_status(f"Saved: {path}", 3000)
        return True

    def save_as(self) -> bool:
        return self.save(force_dialog=True)

    # ---------- Format ----------
    def insert_heading(self) -> bool:
        try:
            self.session.insert_heading()
        except FragmentInsertError as e:
            self._insert_failed(e)
            return False
        return True

    def insert_link(self) -> bool:
        url = self.inputs.get_text(
            self.view, "Insert Link", "Enter URL (e.g. https://example.com):"
        )
        if url is None or not url.strip():
            return False

        text = self.inputs.get_text(self.view, "Insert Link", "Link text:", url)
        try:
            return self.session.insert_link(url, text)
        except FragmentInsertError as e:
            self._insert_failed(e)
            return False

    # ---------- Editor / links ----------
    def on_editor_changed(self) -> None:
        self.session.sync_from_surface()

    def open_link(self, target: str) -> bool:
        try:
            url = parse_link_target(target)
        except MalformedUriError as e:
            log.warning("Malformed link target %r: %s", target, e)
            self.messages.error(self.view, "Invalid URL", f"Invalid URL: {e}")
            return False

        if not self.browser.open_url(url):
            self.messages.warning(
                self.view,
                "Open Link",
                "Could not open the link. Try copying the URL into a browser.",
            )
            return False
        return True

    def show_about(self) -> None:
        self.messages.info(
            self.view,
            "About",
            f"{APP_NAME}\nVersion {self.app_version}\n\nA small HTML-based word processor.",
        )

    # ---------- Helpers ----------
    def _suggested_path(self) -> str:
        last = self.settings.get_last_dir() if self.settings else None
        return str(Path(last) / self.default_filename) if last else self.default_filename

    def _remember_dir(self, path: Path | None) -> None:
        if self.settings is not None and path is not None:
            self.settings.set_last_dir(str(path.parent))

    def _update_title(self) -> None:
        path = self.session.file_path
        name = path.name if path else "New document"
        self.view.set_title(f"{name} — {APP_NAME}")

    def _insert_failed(self, e: Exception) -> None:
        log.warning("Fragment insertion failed: %s", e)
        self.messages.error(self.view, "Insert Error", f"Failed to insert HTML:\n{e}")
