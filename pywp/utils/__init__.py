"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_DOCUMENT_HTML,
    DEFAULT_FILENAME,
    DOCUMENT_SUFFIXES,
    OPEN_FILTER,
    SAVE_FILTER,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
)
from .logging_setup import setup_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_DOCUMENT_HTML",
    "DEFAULT_FILENAME",
    "DOCUMENT_SUFFIXES",
    "OPEN_FILTER",
    "SAVE_FILTER",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
    "setup_logging",
]
