"""List and install extensions across registered repositories."""

from __future__ import annotations

import logging
from pathlib import Path

from pgdist_core.version import Version

from .model import AvailableExtension
from .registry import RepositoryRegistry, default_repositories

logger = logging.getLogger(__name__)


def get_available_extensions(repositories: RepositoryRegistry | None = None) -> list[AvailableExtension]:
    """Collect the extensions of every registered repository."""

    registry = repositories or default_repositories()
    extensions: list[AvailableExtension] = []
    for namespace in registry.namespaces():
        extensions.extend(registry.get(namespace).get_available_extensions())
    return extensions


def install(
    namespace: str,
    name: str,
    version: Version,
    *,
    postgresql_version: str,
    library_dir: Path,
    extension_dir: Path,
    repositories: RepositoryRegistry | None = None,
) -> list[Path]:
    """Fetch ``namespace:name`` matching ``version`` and install it.

    Returns the paths written into ``library_dir`` and ``extension_dir``.
    """

    repository = (repositories or default_repositories()).get(namespace)
    resolved, archive = repository.get_archive(postgresql_version, name, version)
    library_dir = Path(library_dir)
    extension_dir = Path(extension_dir)
    library_dir.mkdir(parents=True, exist_ok=True)
    extension_dir.mkdir(parents=True, exist_ok=True)
    files = repository.install(name, library_dir, extension_dir, archive)
    logger.info("installed %s:%s %s (%d files)", namespace, name, resolved, len(files))
    return files
