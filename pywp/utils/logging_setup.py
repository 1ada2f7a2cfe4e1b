from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: str | None = None) -> None:
    """
    Configure root logging once at startup.

    Unknown level names fall back to INFO rather than failing the launch.
    """
    resolved = getattr(logging, (level or "INFO").strip().upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
