"""HTTP client for the GitHub releases API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence
from urllib.parse import urlsplit

import requests
from requests import RequestException, Response

from pgdist_core.config import ArchiveSettings
from pgdist_core.errors import TransportError

from .models import Release

log = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION_HEADER = "X-GitHub-Api-Version"
GITHUB_API_VERSION = "2022-11-28"


def releases_api_url(url: str, *, api_url: str = GITHUB_API_URL) -> str:
    """Map ``https://github.com/<owner>/<repo>[?query]`` to its releases endpoint."""

    parts = [p for p in urlsplit(url).path.split("/") if p]
    if len(parts) < 2:
        raise ValueError(f"not a GitHub repository URL: {url!r}")
    owner, repo = parts[0], parts[1]
    return f"{api_url.rstrip('/')}/repos/{owner}/{repo}/releases"


@dataclass
class GitHubClient:
    """Session-backed access to one repository's releases."""

    releases_url: str
    settings: ArchiveSettings = field(default_factory=ArchiveSettings)
    session: requests.Session = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.releases_url = self.releases_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers[GITHUB_API_VERSION_HEADER] = GITHUB_API_VERSION
        self.session.headers["User-Agent"] = self.settings.user_agent
        if self.settings.github_token:
            self.session.headers["Authorization"] = f"Bearer {self.settings.github_token}"

    def _request(
        self,
        url: str,
        *,
        ok_statuses: Sequence[int] = tuple(range(200, 300)),
        **kwargs: Any,
    ) -> Response:
        log.debug("GET %s params=%s", url, kwargs.get("params"))
        try:
            resp = self.session.get(url, timeout=self.settings.timeout_seconds, **kwargs)
        except RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}", url=url) from exc

        if resp.status_code not in ok_statuses:
            raise TransportError(
                f"GET {url} returned {resp.status_code}",
                url=url,
                status=resp.status_code,
            )
        return resp

    def _json(self, resp: Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(f"invalid JSON from {resp.url}", url=resp.url) from exc

    def list_releases(self, page: int, per_page: int) -> list[Release]:
        resp = self._request(
            self.releases_url,
            params={"page": str(page), "per_page": str(per_page)},
        )
        payload = self._json(resp)
        if not isinstance(payload, list):
            raise TransportError(f"expected a release list from {resp.url}", url=resp.url)
        for item in payload:
            if not isinstance(item, dict):
                raise TransportError(f"malformed release record from {resp.url}: {item!r}", url=resp.url)
        return [Release.from_dict(item) for item in payload]

    def get_release_by_tag(self, tag: str) -> Release | None:
        """Return the release tagged ``tag``, or ``None`` when the catalog has none."""

        url = f"{self.releases_url}/tags/{tag}"
        resp = self._request(url, ok_statuses=(*range(200, 300), 404))
        if resp.status_code == 404:
            return None
        payload = self._json(resp)
        if not isinstance(payload, dict):
            raise TransportError(f"expected a release object from {url}", url=url)
        return Release.from_dict(payload)

    def get_text(self, url: str) -> str:
        return self._request(url).text

    def get_bytes(self, url: str) -> bytes:
        return self._request(url).content
