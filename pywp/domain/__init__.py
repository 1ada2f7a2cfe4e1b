"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import FragmentInsertError, MalformedUriError, NoTargetPathError
from .interfaces import IFileService, IRichTextSurface, ISettingsService
from .models import Document

__all__ = [
    "IFileService",
    "IRichTextSurface",
    "ISettingsService",
    "Document",
    "FragmentInsertError",
    "MalformedUriError",
    "NoTargetPathError",
]
