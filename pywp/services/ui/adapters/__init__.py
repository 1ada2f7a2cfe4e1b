from __future__ import annotations

from .qt_browser import QtBrowserService
from .qt_dialogs import QtFileDialogService, QtInputDialogService
from .qt_messages import QtMessageService
from .qt_rich_text import QtRichTextSurface

__all__ = [
    "QtBrowserService",
    "QtFileDialogService",
    "QtInputDialogService",
    "QtMessageService",
    "QtRichTextSurface",
]
