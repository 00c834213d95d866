"""Top-level API: resolve a catalog URL and version into verified bytes on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .extract import extract as _extract
from .registry import CatalogRegistry, default_catalogs
from .target import current_target
from .version import Version

logger = logging.getLogger(__name__)


def get_version(url: str, version: Version, *, catalogs: CatalogRegistry | None = None) -> Version:
    """Return the newest published version at ``url`` matching ``version``."""

    repository = (catalogs or default_catalogs()).get(url)
    return repository.get_version(version)


def get_archive_for_target(
    url: str,
    version: Version,
    target: str,
    *,
    catalogs: CatalogRegistry | None = None,
) -> tuple[Version, bytes]:
    """Return the resolved version and verified archive bytes for ``target``."""

    repository = (catalogs or default_catalogs()).get(url)
    logger.debug("fetching %s for %s from %s via %s", version, target, url, repository.name)
    return repository.get_archive(version, target)


def get_archive(url: str, version: Version, *, catalogs: CatalogRegistry | None = None) -> tuple[Version, bytes]:
    """Same as :func:`get_archive_for_target` for the host platform."""

    return get_archive_for_target(url, version, current_target(), catalogs=catalogs)


def extract(data: bytes, out_dir: Path) -> list[Path]:
    """Extract a verified archive into ``out_dir``."""

    return _extract(data, out_dir)
