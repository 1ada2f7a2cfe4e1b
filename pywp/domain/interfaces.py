from __future__ import annotations
from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write whole text files."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_last_dir(self) -> str | None: ...
    def set_last_dir(self, directory: str) -> None: ...


class IRichTextSurface(Protocol):
    """
    Host rich-text document model. Owns parsing, rendering and the caret;
    offsets are character positions in the rendered document.
    """

    def load_markup(self, markup: str) -> None: ...
    def markup(self) -> str: ...
    def caret_position(self) -> int: ...
    def insert_markup(self, offset: int, fragment: str) -> None:
        """Insert `fragment` parsed as markup. Raises FragmentInsertError."""
        ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def app_version(self) -> str: ...


class IAppConfig(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def get_version(self) -> str: ...
