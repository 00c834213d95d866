"""Archive repository backed by GitHub releases."""

from __future__ import annotations

import logging

from pgdist_core.config import ArchiveSettings, load_settings
from pgdist_core.integrity import extract_hash, verify_digest
from pgdist_core.registry import MatcherRegistry, default_matchers
from pgdist_core.repository import ArchiveRepository
from pgdist_core.resolve import ResolvedAssets, find_release, postgresql_asset_name, resolve_assets
from pgdist_core.version import Version

from .client import GitHubClient, releases_api_url
from .models import Release

logger = logging.getLogger(__name__)


class GitHubRepository(ArchiveRepository):
    """Resolve and download archives published as GitHub release assets."""

    def __init__(
        self,
        url: str,
        *,
        client: GitHubClient | None = None,
        settings: ArchiveSettings | None = None,
        matchers: MatcherRegistry | None = None,
    ) -> None:
        self.url = url
        self.settings = settings or (client.settings if client else load_settings())
        self.client = client or GitHubClient(releases_api_url(url), settings=self.settings)
        self.matchers = matchers if matchers is not None else default_matchers()

    @property
    def name(self) -> str:
        return "github"

    def tag_for(self, version: Version) -> str:
        return str(version)

    def archive_asset_name(self, version: Version, target: str) -> str:
        return postgresql_asset_name(version, target)

    def get_release(self, version: Version) -> Release:
        return find_release(
            version,
            self.client.list_releases,
            self.client.get_release_by_tag,
            per_page=self.settings.per_page,
            tag_for=self.tag_for,
        )

    def get_version(self, version: Version) -> Version:
        release = self.get_release(version)
        resolved = Version.parse(release.tag)
        logger.info("resolved %s to %s from %s", version, resolved, self.url)
        return resolved

    def get_assets(self, version: Version, target: str) -> ResolvedAssets:
        release = self.get_release(version)
        catalog_target = self.matchers.target_for(self.url, target)
        return resolve_assets(release, catalog_target, asset_name=self.archive_asset_name)

    def get_archive(self, version: Version, target: str) -> tuple[Version, bytes]:
        assets = self.get_assets(version, target)
        text = self.client.get_text(assets.checksum.download_location)
        expected = extract_hash(text, assets.archive.name)

        logger.debug("downloading %s", assets.archive.download_location)
        data = self.client.get_bytes(assets.archive.download_location)
        verify_digest(data, expected, assets.archive.name)
        logger.info("fetched %s (%d bytes, sha256 %s)", assets.archive.name, len(data), expected)
        return assets.version, data
