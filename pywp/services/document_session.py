from __future__ import annotations

import logging
from pathlib import Path

from pywp.domain.errors import NoTargetPathError
from pywp.domain.interfaces import IFileService, IRichTextSurface
from pywp.domain.models import Document
from pywp.services.fragments import heading_fragment, link_fragment, with_document_suffix
from pywp.utils.constants import DEFAULT_DOCUMENT_HTML

log = logging.getLogger(__name__)


class DocumentSession:
    """
    The document currently being edited: its markup and the file it is bound to.

    State moves between "unsaved new" (no path) and "bound to path". Editing
    never changes the bound path; only open/save/new do. Errors propagate to
    the caller, which decides how to report them.
    """

    def __init__(
        self,
        files: IFileService,
        surface: IRichTextSurface | None = None,
        *,
        placeholder: str = DEFAULT_DOCUMENT_HTML,
        escape_links: bool = True,
    ) -> None:
        self.files = files
        self.placeholder = placeholder
        self.escape_links = escape_links
        self.doc = Document(content=placeholder)
        self._surface = surface
        if surface is not None:
            surface.load_markup(self.doc.content)

    # ---------- State ----------
    @property
    def content(self) -> str:
        return self.doc.content

    @property
    def file_path(self) -> Path | None:
        return self.doc.path

    def attach_surface(self, surface: IRichTextSurface) -> None:
        """Bind the host document model and show the current content in it."""
        self._surface = surface
        surface.load_markup(self.doc.content)

    def sync_from_surface(self) -> None:
        """Pick up user edits made directly in the surface."""
        if self._surface is not None:
            self.doc.content = self._surface.markup()

    # ---------- File operations ----------
    def new(self) -> None:
        self.doc = Document(content=self.placeholder)
        self._reload_surface()
        log.info("New document")

    def open(self, path: Path) -> None:
        path = Path(path).absolute()
        # read first: a failed read must leave content and path untouched
        text = self.files.read_text(path)
        self.doc = Document(content=text, path=path)
        self._reload_surface()
        log.info("Opened %s (%d chars)", path, len(text))

    def save(self, target: Path | None = None) -> Path:
        """
        Write the content to `target` (normalized, then bound) or to the bound path.

        The path is bound before writing and stays bound if the write fails.
        """
        if target is not None:
            self.doc.path = with_document_suffix(Path(target).absolute())
        elif self.doc.path is None:
            raise NoTargetPathError("Document has no file path; choose a target first.")

        path = self.doc.path
        self.files.write_text(path, self.doc.content)
        log.info("Saved %s", path)
        return path

    # ---------- Formatting ----------
    def insert_fragment(self, fragment: str, offset: int | None = None) -> None:
        """Insert markup at `offset` (default: caret). Raises FragmentInsertError."""
        surface = self._require_surface()
        if offset is None:
            offset = surface.caret_position()
        surface.insert_markup(offset, fragment)
        self.doc.content = surface.markup()
        log.debug("Inserted %r at %d", fragment, offset)

    def insert_heading(self) -> None:
        self.insert_fragment(heading_fragment())

    def insert_link(self, url: str, text: str | None = None, offset: int | None = None) -> bool:
        fragment = link_fragment(url, text, escape_markup=self.escape_links)
        if fragment is None:
            log.debug("Link insertion aborted: empty URL")
            return False
        self.insert_fragment(fragment, offset)
        return True

    # ---------- Helpers ----------
    def _reload_surface(self) -> None:
        if self._surface is not None:
            self._surface.load_markup(self.doc.content)

    def _require_surface(self) -> IRichTextSurface:
        if self._surface is None:
            raise RuntimeError("No rich-text surface attached to the session.")
        return self._surface
