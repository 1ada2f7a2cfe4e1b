# pywp/services/fragments.py
from __future__ import annotations

from html import escape
from pathlib import Path

from PyQt6.QtCore import QUrl

from pywp.domain.errors import MalformedUriError
from pywp.utils.constants import DOCUMENT_SUFFIXES, HEADING_FRAGMENT, LINK_STYLE


def heading_fragment() -> str:
    return HEADING_FRAGMENT


def link_fragment(url: str, text: str | None = None, *, escape_markup: bool = True) -> str | None:
    """
    Build the anchor fragment for a hyperlink.

    Returns None when `url` is blank. A blank `text` falls back to the URL.
    With `escape_markup=False` both values are inserted verbatim, so a quote
    in either one breaks the anchor's attribute structure.
    """
    if not url or not url.strip():
        return None
    if text is None or not text.strip():
        text = url

    if escape_markup:
        href, label = escape(url, quote=True), escape(text, quote=False)
    else:
        href, label = url, text
    return f'<a href="{href}" style="{LINK_STYLE}">{label}</a>'


def with_document_suffix(path: Path) -> Path:
    """Append '.doc' unless the name already ends in .doc/.html (any case)."""
    if path.name.lower().endswith(DOCUMENT_SUFFIXES):
        return path
    return path.with_name(path.name + ".doc")


def parse_link_target(target: str) -> QUrl:
    """Validate an activated hyperlink target. Raises MalformedUriError."""
    raw = (target or "").strip()
    if not raw:
        raise MalformedUriError("empty URL")

    url = QUrl(raw, QUrl.ParsingMode.StrictMode)
    if not url.isValid():
        raise MalformedUriError(f"{raw}: {url.errorString()}")
    if not url.scheme():
        raise MalformedUriError(f"{raw}: missing scheme")
    return url
