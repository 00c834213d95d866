"""Errors raised by the predicate registries."""

from __future__ import annotations

from pgdist_core.errors import ArchiveError


class RegistrationConflict(ArchiveError):
    """Raised when a predicate is already registered with another handler."""


class RegistryLookupError(ArchiveError, LookupError):
    """Raised when no registered predicate accepts a URL or name."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no registration accepts {key!r}")
        self.key = key


class CatalogNotFound(RegistryLookupError):
    """No catalog handler accepts the URL."""


class MatcherNotFound(RegistryLookupError):
    """No target matcher accepts the URL."""
