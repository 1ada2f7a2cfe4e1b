from __future__ import annotations

from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import QTextEdit

from pywp.domain.errors import FragmentInsertError
from pywp.domain.interfaces import IRichTextSurface


class QtRichTextSurface(IRichTextSurface):
    """Narrow adapter exposing a QTextEdit's document as the session's markup model."""

    def __init__(self, edit: QTextEdit):
        self._e = edit

    def load_markup(self, markup: str) -> None:
        # Programmatic loads must not look like user edits to textChanged listeners.
        blocked = self._e.blockSignals(True)
        try:
            self._e.setHtml(markup)
        finally:
            self._e.blockSignals(blocked)

    def markup(self) -> str:
        return self._e.toHtml()

    def caret_position(self) -> int:
        return self._e.textCursor().position()

    def insert_markup(self, offset: int, fragment: str) -> None:
        doc = self._e.document()
        last = doc.characterCount() - 1
        if offset < 0 or offset > last:
            raise FragmentInsertError(f"Invalid insertion offset {offset} (valid range 0..{last})")

        c = QTextCursor(doc)
        c.setPosition(offset)
        c.beginEditBlock()
        try:
            c.insertHtml(fragment)
        finally:
            c.endEditBlock()
        self._e.setTextCursor(c)
