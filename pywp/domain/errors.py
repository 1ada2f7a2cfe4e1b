from __future__ import annotations


class NoTargetPathError(RuntimeError):
    """Save was requested for a document that is not bound to a path."""


class FragmentInsertError(ValueError):
    """The host document model rejected a markup fragment or its offset."""


class MalformedUriError(ValueError):
    """A hyperlink target could not be parsed as a URL."""
