"""GitHub catalog variant for Portal Corp release naming."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlsplit

from pgdist_core.github.repository import GitHubRepository
from pgdist_core.version import Version

URL = "https://github.com/portalcorp"


def matcher(target: str) -> str:
    """Rewrite a target triple to Portal Corp's ``<os>-<arch>`` platform name."""

    arch = target.split("-", 1)[0]
    if "darwin" in target:
        return f"macos-{arch}"
    if "windows" in target:
        return f"windows-{arch}"
    if "linux" in target:
        return f"linux-{arch}"
    return target


class PortalCorpCatalog(GitHubRepository):
    """Release assets named ``<repo>-<version>-pg<major>-<platform>.zip``.

    The catalog URL is ``<URL>/<repo>?postgresql_version=<version>``.
    """

    def __init__(self, url: str, **kwargs: Any) -> None:
        super().__init__(url, **kwargs)
        parsed = urlsplit(url)
        parts = [p for p in parsed.path.split("/") if p]
        if len(parts) < 2:
            raise ValueError(f"missing extension name in {url!r}")
        self.extension = parts[1]
        postgresql_version = parse_qs(parsed.query).get("postgresql_version", [""])[0]
        if not postgresql_version:
            raise ValueError(f"missing postgresql_version in {url!r}")
        self.postgresql_major = Version.parse(postgresql_version).major

    @property
    def name(self) -> str:
        return "portal-corp"

    def tag_for(self, version: Version) -> str:
        return f"v{version}"

    def archive_asset_name(self, version: Version, target: str) -> str:
        return f"{self.extension}-{version}-pg{self.postgresql_major}-{target}.zip"
