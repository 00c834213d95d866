"""Release and asset records decoded from catalog responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pgdist_core.errors import TransportError


@dataclass(frozen=True)
class Asset:
    """A single downloadable file attached to a release."""

    name: str
    download_location: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Asset":
        name = data.get("name")
        url = data.get("browser_download_url")
        if not isinstance(name, str) or not isinstance(url, str):
            raise TransportError(f"malformed asset payload: {dict(data)!r}")
        return cls(name=name, download_location=url)


@dataclass(frozen=True)
class Release:
    """A tagged release and its assets, in catalog order."""

    tag: str
    assets: tuple[Asset, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Release":
        tag = data.get("tag_name")
        if not isinstance(tag, str):
            raise TransportError(f"release payload has no tag_name: {dict(data)!r}")
        raw_assets = data.get("assets") or []
        if not isinstance(raw_assets, list):
            raise TransportError(f"release {tag} has a malformed asset list: {raw_assets!r}")
        for item in raw_assets:
            if not isinstance(item, Mapping):
                raise TransportError(f"release {tag} has a malformed asset: {item!r}")
        assets = tuple(Asset.from_dict(item) for item in raw_assets)
        return cls(tag=tag, assets=assets)
