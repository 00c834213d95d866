"""Resolve, fetch, verify and extract PostgreSQL archives from release catalogs."""

from __future__ import annotations

__version__ = "0.1.0"

from .archive import extract, get_archive, get_archive_for_target, get_version
from .errors import (
    ArchiveError,
    AssetHashNotFound,
    AssetNotFound,
    ExtractionError,
    IntegrityMismatch,
    ReleaseNotFound,
    TransportError,
    Unexpected,
    VersionParseError,
)
from .registry import (
    THESEUS_POSTGRESQL_BINARIES_URL,
    CatalogNotFound,
    CatalogRegistry,
    MatcherNotFound,
    MatcherRegistry,
    RegistrationConflict,
    UrlPrefix,
    default_catalogs,
    default_matchers,
    initialize,
)
from .target import current_target
from .version import Version

__all__ = [
    "__version__",
    "ArchiveError",
    "AssetHashNotFound",
    "AssetNotFound",
    "CatalogNotFound",
    "CatalogRegistry",
    "ExtractionError",
    "IntegrityMismatch",
    "MatcherNotFound",
    "MatcherRegistry",
    "RegistrationConflict",
    "ReleaseNotFound",
    "THESEUS_POSTGRESQL_BINARIES_URL",
    "TransportError",
    "Unexpected",
    "UrlPrefix",
    "Version",
    "VersionParseError",
    "current_target",
    "default_catalogs",
    "default_matchers",
    "extract",
    "get_archive",
    "get_archive_for_target",
    "get_version",
    "initialize",
]
