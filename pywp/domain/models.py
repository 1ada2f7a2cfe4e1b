from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    content: str
    path: Path | None = None
