from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QTextEdit


class LinkAwareTextEdit(QTextEdit):
    """
    Editable rich-text widget that reports Ctrl+click on a hyperlink.

    Plain clicks keep normal caret behaviour so links stay editable.
    The pointing-hand cursor is shown while Ctrl is held over an anchor.
    """

    linkActivated = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAcceptRichText(True)
        self.setMouseTracking(True)

    def mouseMoveEvent(self, event):
        super().mouseMoveEvent(event)
        anchor = self.anchorAt(event.position().toPoint())
        ctrl = bool(event.modifiers() & Qt.KeyboardModifier.ControlModifier)
        if anchor and ctrl:
            self.viewport().setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.viewport().setCursor(Qt.CursorShape.IBeamCursor)

    def mouseReleaseEvent(self, event):
        anchor = self.anchorAt(event.position().toPoint())
        ctrl = bool(event.modifiers() & Qt.KeyboardModifier.ControlModifier)
        super().mouseReleaseEvent(event)
        if anchor and ctrl and event.button() == Qt.MouseButton.LeftButton:
            self.linkActivated.emit(anchor)
