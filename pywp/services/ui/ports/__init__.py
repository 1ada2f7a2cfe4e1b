from __future__ import annotations

from .browser import IBrowserService
from .dialogs import IFileDialogService, IInputDialogService
from .messages import IMessageService

__all__ = [
    "IBrowserService",
    "IFileDialogService",
    "IInputDialogService",
    "IMessageService",
]
