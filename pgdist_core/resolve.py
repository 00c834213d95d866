"""Release and asset selection for a version constraint and target."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

from .errors import AssetNotFound, ReleaseNotFound, Unexpected
from .github.models import Asset, Release
from .version import Version

logger = logging.getLogger(__name__)

PageFetcher = Callable[[int, int], Sequence[Release]]
TagLookup = Callable[[str], "Release | None"]
AssetNamer = Callable[[Version, str], str]

DEFAULT_PAGE_SIZE = 100
CHECKSUM_SUFFIX = ".sha256"


def postgresql_asset_name(version: Version, target: str) -> str:
    return f"postgresql-{version}-{target}.tar.gz"


def iter_release_pages(fetch_page: PageFetcher, per_page: int = DEFAULT_PAGE_SIZE) -> Iterator[Sequence[Release]]:
    """Yield release pages starting at page 1 until a page comes back empty."""

    page = 1
    while True:
        releases = fetch_page(page, per_page)
        if not releases:
            return
        yield releases
        page += 1


def select_release(version: Version, pages: Iterable[Iterable[Release]]) -> Release:
    """Return the release with the greatest tag matched by ``version``.

    Every tag is parsed; a malformed tag raises instead of being skipped.
    """

    best: Release | None = None
    best_version: Version | None = None
    for page in pages:
        for release in page:
            candidate = Version.parse(release.tag)
            if not version.matches(candidate):
                continue
            if best_version is None or candidate > best_version:
                best, best_version = release, candidate
    if best is None:
        raise ReleaseNotFound(str(version))
    logger.debug("selected release %s for %s", best.tag, version)
    return best


def find_release(
    version: Version,
    fetch_page: PageFetcher,
    lookup_tag: TagLookup,
    *,
    per_page: int = DEFAULT_PAGE_SIZE,
    tag_for: Callable[[Version], str] = str,
) -> Release:
    """Resolve ``version`` against a catalog.

    A fully specified version is looked up by tag; anything else enumerates
    the listing page by page.
    """

    if not version.is_exact:
        return select_release(version, iter_release_pages(fetch_page, per_page))

    release = lookup_tag(tag_for(version))
    if release is None:
        raise ReleaseNotFound(str(version))
    if not version.matches(Version.parse(release.tag)):
        raise Unexpected(f"tag lookup for {version} returned release {release.tag}")
    return release


@dataclass(frozen=True)
class ResolvedAssets:
    """The archive and checksum assets of a release for one target."""

    version: Version
    archive: Asset
    checksum: Asset


def resolve_assets(
    release: Release,
    target: str,
    *,
    asset_name: AssetNamer = postgresql_asset_name,
) -> ResolvedAssets:
    """Find the archive and its ``.sha256`` companion by exact name."""

    version = Version.parse(release.tag)
    archive_name = asset_name(version, target)
    checksum_name = f"{archive_name}{CHECKSUM_SUFFIX}"
    archive: Asset | None = None
    checksum: Asset | None = None

    for asset in release.assets:
        if asset.name == archive_name:
            archive = asset
        elif asset.name == checksum_name:
            checksum = asset
        if archive is not None and checksum is not None:
            return ResolvedAssets(version=version, archive=archive, checksum=checksum)

    raise AssetNotFound(archive_name)
