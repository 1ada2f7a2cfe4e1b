from __future__ import annotations

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices

from pywp.services.ui.ports.browser import IBrowserService


class QtBrowserService(IBrowserService):
    """Opens URLs with the desktop's default handler."""

    def open_url(self, url: QUrl) -> bool:
        return QDesktopServices.openUrl(url)
