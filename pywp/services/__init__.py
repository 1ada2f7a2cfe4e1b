"""Application services: file I/O, settings, config, the document session and UI."""
