"""Portal Corp extension repository."""

from __future__ import annotations

from pathlib import Path

from pgdist_core.archive import get_archive
from pgdist_core.extensions import (
    AvailableExtension,
    Repository,
    RepositoryRegistry,
    default_repositories,
    install_zip_bundle,
)
from pgdist_core.registry import (
    CatalogRegistry,
    MatcherRegistry,
    UrlPrefix,
    default_catalogs,
    default_matchers,
)
from pgdist_core.version import Version

from .catalog import URL, PortalCorpCatalog, matcher

NAMESPACE = "portal-corp"


class PortalCorp(Repository):
    """Precompiled extension bundles distributed as zip release assets."""

    def __init__(self, catalogs: CatalogRegistry | None = None) -> None:
        self.catalogs = catalogs

    @classmethod
    def initialize(
        cls,
        catalogs: CatalogRegistry | None = None,
        matchers: MatcherRegistry | None = None,
        repositories: RepositoryRegistry | None = None,
    ) -> None:
        """Register the catalog, target matcher and repository."""

        predicate = UrlPrefix(URL)
        (matchers or default_matchers()).register(predicate, matcher)
        (catalogs or default_catalogs()).register(predicate, PortalCorpCatalog)
        (repositories or default_repositories()).register(NAMESPACE, cls)

    @property
    def name(self) -> str:
        return NAMESPACE

    def get_available_extensions(self) -> list[AvailableExtension]:
        return [
            AvailableExtension(
                self.name,
                "pgvector_compiled",
                "Precompiled OS packages for pgvector",
            )
        ]

    def get_archive(self, postgresql_version: str, name: str, version: Version) -> tuple[Version, bytes]:
        url = f"{URL}/{name}?postgresql_version={postgresql_version}"
        return get_archive(url, version, catalogs=self.catalogs)

    def install(self, name: str, library_dir: Path, extension_dir: Path, archive: bytes) -> list[Path]:
        return install_zip_bundle(archive, library_dir, extension_dir)
