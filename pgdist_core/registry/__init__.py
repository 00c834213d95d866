"""Process-wide catalog and target matcher registries."""

from __future__ import annotations

from .entry import Predicate, RegistryEntry, UrlPrefix
from .errors import (
    CatalogNotFound,
    MatcherNotFound,
    RegistrationConflict,
    RegistryLookupError,
)
from .registry import (
    CatalogFactory,
    CatalogRegistry,
    MatcherRegistry,
    PredicateRegistry,
    TargetMatcher,
)

THESEUS_POSTGRESQL_BINARIES_URL = "https://github.com/theseus-rs/postgresql-binaries"

_CATALOGS = CatalogRegistry()
_MATCHERS = MatcherRegistry()


def default_catalogs() -> CatalogRegistry:
    """Return the process-wide catalog registry."""

    return _CATALOGS


def default_matchers() -> MatcherRegistry:
    """Return the process-wide target matcher registry."""

    return _MATCHERS


def identity_matcher(target: str) -> str:
    return target


def initialize(
    catalogs: CatalogRegistry | None = None,
    matchers: MatcherRegistry | None = None,
) -> None:
    """Register the GitHub catalog serving the PostgreSQL binaries.

    Safe to call more than once: repeated registrations are no-ops.
    """

    from pgdist_core.github.repository import GitHubRepository

    predicate = UrlPrefix(THESEUS_POSTGRESQL_BINARIES_URL)
    (catalogs or _CATALOGS).register(predicate, GitHubRepository)
    (matchers or _MATCHERS).register(predicate, identity_matcher)


__all__ = [
    "THESEUS_POSTGRESQL_BINARIES_URL",
    "CatalogFactory",
    "CatalogNotFound",
    "CatalogRegistry",
    "MatcherNotFound",
    "MatcherRegistry",
    "Predicate",
    "PredicateRegistry",
    "RegistrationConflict",
    "RegistryEntry",
    "RegistryLookupError",
    "TargetMatcher",
    "UrlPrefix",
    "default_catalogs",
    "default_matchers",
    "identity_matcher",
    "initialize",
]
