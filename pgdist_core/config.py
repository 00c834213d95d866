"""Settings for the archive catalog client."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from . import __version__

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "pgdist"
CONFIG_FILE_NAME = "config.toml"
TOKEN_ENV_VAR = "GITHUB_TOKEN"


def default_config_path() -> Path:
    """Return the platform-specific default config path."""

    return Path(user_config_dir(DEFAULT_APP_NAME, appauthor=False)) / CONFIG_FILE_NAME


@dataclass(frozen=True)
class ArchiveSettings:
    github_token: str | None = None
    timeout_seconds: float = 30.0
    per_page: int = 100
    user_agent: str = f"{DEFAULT_APP_NAME}/{__version__}"


def load_settings(path: Path | None = None, *, environ: dict[str, str] | None = None) -> ArchiveSettings:
    """Load ``[archive]`` settings from TOML, then apply environment overrides.

    A missing or unreadable file yields the defaults.
    """

    env = os.environ if environ is None else environ
    settings = _load_file(path or default_config_path())
    token = (env.get(TOKEN_ENV_VAR) or "").strip()
    if token:
        settings = replace(settings, github_token=token)
    return settings


def _load_file(path: Path) -> ArchiveSettings:
    if not path.exists():
        return ArchiveSettings()
    try:
        payload = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return ArchiveSettings()
    table = payload.get("archive")
    if not isinstance(table, dict):
        return ArchiveSettings()
    defaults = ArchiveSettings()
    token = str(table.get("github_token") or "").strip() or None
    return ArchiveSettings(
        github_token=token,
        timeout_seconds=max(_number(table, "timeout_seconds", float, defaults.timeout_seconds, path), 1.0),
        per_page=max(_number(table, "per_page", int, defaults.per_page, path), 1),
        user_agent=str(table.get("user_agent") or defaults.user_agent),
    )


def _number(table: dict, key: str, kind: type, default: float, path: Path):
    raw = table.get(key, default)
    try:
        return kind(raw)
    except (TypeError, ValueError, OverflowError):
        logger.warning("ignoring invalid %s=%r in %s", key, raw, path)
        return default
