from __future__ import annotations

from typing import Protocol, runtime_checkable

from PyQt6.QtCore import QUrl


@runtime_checkable
class IBrowserService(Protocol):
    """Hand a URL to the system browser."""

    def open_url(self, url: QUrl) -> bool:
        """Return False if the platform could not open the URL."""
        ...
