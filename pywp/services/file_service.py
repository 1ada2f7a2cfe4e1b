from __future__ import annotations

from pathlib import Path

from pywp.domain.interfaces import IFileService


class FileService(IFileService):
    """Whole-file text reads/writes for documents."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        """Read `path` line by line; every line (the last included) ends with '\\n'."""
        try:
            with path.open("r", encoding=self.encoding, newline=None) as fh:
                return "".join(line if line.endswith("\n") else line + "\n" for line in fh)
        except (UnicodeError, LookupError) as e:
            raise OSError(f"Cannot decode {path} as {self.encoding}: {e}") from e

    def write_text(self, path: Path, text: str) -> None:
        # Encode before opening so an unencodable document leaves the target untouched.
        try:
            data = text.encode(self.encoding)
        except (UnicodeError, LookupError) as e:
            raise OSError(f"Cannot encode document as {self.encoding}: {e}") from e
        # Plain overwrite: no temp file, no rename.
        with path.open("wb") as fh:
            fh.write(data)
