"""Shared fixtures: an in-process GitHub-style release catalog."""

from __future__ import annotations

import http.server
import json
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List
from urllib.parse import parse_qs, urlparse

import pytest

from pgdist_core.config import ArchiveSettings
from pgdist_core.github import GitHubClient

from builders import sha256

OWNER = "theseus-rs"
REPO = "postgresql-binaries"
CATALOG_URL = f"https://github.com/{OWNER}/{REPO}"


@dataclass
class CatalogState:
    """Releases, downloadable assets and a request log."""

    base_url: str = ""
    releases: List[Dict[str, Any]] = field(default_factory=list)
    downloads: Dict[str, bytes] = field(default_factory=dict)
    requests: List[str] = field(default_factory=list)
    fail_status: int | None = None

    def add_release(self, tag: str, assets: Dict[str, bytes] | None = None) -> None:
        entries = []
        for name, data in (assets or {}).items():
            self.downloads[name] = data
            entries.append({"name": name, "browser_download_url": f"{self.base_url}/download/{name}"})
        self.releases.append({"tag_name": tag, "assets": entries})

    def add_archive_release(
        self,
        tag: str,
        target: str,
        archive: bytes,
        *,
        asset_name: str | None = None,
        checksum_body: str | None = None,
    ) -> str:
        name = asset_name or f"postgresql-{tag}-{target}.tar.gz"
        body = checksum_body if checksum_body is not None else f"{sha256(archive)}  {name}\n"
        self.add_release(tag, {name: archive, f"{name}.sha256": body.encode("utf-8")})
        return name

    @property
    def releases_url(self) -> str:
        return f"{self.base_url}/repos/{OWNER}/{REPO}/releases"


class _CatalogHandler(http.server.BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def log_message(self, format: str, *args: Any) -> None:
        pass

    def _state(self) -> CatalogState:
        return self.server.state  # type: ignore[attr-defined]

    def _write(self, status: int, data: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def do_GET(self) -> None:
        state = self._state()
        state.requests.append(self.path)
        if state.fail_status is not None:
            self._write(state.fail_status, b"unavailable", "text/plain")
            return

        parsed = urlparse(self.path)
        parts = [p for p in parsed.path.split("/") if p]
        if parts == ["repos", OWNER, REPO, "releases"]:
            query = parse_qs(parsed.query)
            page = int(query.get("page", ["1"])[0])
            per_page = int(query.get("per_page", ["30"])[0])
            chunk = state.releases[(page - 1) * per_page : page * per_page]
            self._write(200, json.dumps(chunk).encode("utf-8"), "application/json")
            return
        if parts[:5] == ["repos", OWNER, REPO, "releases", "tags"] and len(parts) == 6:
            for release in state.releases:
                if release["tag_name"] == parts[5]:
                    self._write(200, json.dumps(release).encode("utf-8"), "application/json")
                    return
            self._write(404, b'{"message": "Not Found"}', "application/json")
            return
        if parts[:1] == ["download"] and len(parts) == 2 and parts[1] in state.downloads:
            self._write(200, state.downloads[parts[1]], "application/octet-stream")
            return
        self._write(404, b"not found", "text/plain")


@pytest.fixture()
def catalog() -> Iterator[CatalogState]:
    server = http.server.ThreadingHTTPServer(("127.0.0.1", 0), _CatalogHandler)
    state = CatalogState(base_url=f"http://127.0.0.1:{server.server_address[1]}")
    server.state = state  # type: ignore[attr-defined]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield state
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture()
def settings() -> ArchiveSettings:
    return ArchiveSettings(timeout_seconds=5.0, per_page=2)


@pytest.fixture()
def client(catalog: CatalogState, settings: ArchiveSettings) -> GitHubClient:
    return GitHubClient(catalog.releases_url, settings=settings)
