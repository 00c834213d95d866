"""Tests for the pgdist command line."""

from __future__ import annotations

import json

import pytest

from pgdist_cli import main as cli
from pgdist_core import ReleaseNotFound, Version


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    assert excinfo.value.code == 0
    assert "pgdist v" in capsys.readouterr().out


def test_resolve_prints_version(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(cli.archive, "get_version", lambda url, version: Version(16, 4, 0))

    assert cli.main(["resolve", "16"]) == 0
    assert capsys.readouterr().out.strip() == "16.4.0"


def test_archive_errors_exit_with_status_one(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def missing(url: str, version: Version) -> Version:
        raise ReleaseNotFound(str(version))

    monkeypatch.setattr(cli.archive, "get_version", missing)

    assert cli.main(["resolve", "1"]) == 1
    assert "release not found for version 1" in capsys.readouterr().err


def test_malformed_version_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["resolve", "latest"]) == 1
    assert "invalid version" in capsys.readouterr().err


def test_extensions_list_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["extensions", "list", "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert {"namespace": "portal-corp", "name": "pgvector_compiled", "description": "Precompiled OS packages for pgvector"} in payload


def test_extensions_install_requires_qualified_name(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        [
            "extensions",
            "install",
            "pgvector_compiled",
            "--version",
            "0.7.4",
            "--postgresql-version",
            "16",
            "--library-dir",
            "lib",
            "--extension-dir",
            "ext",
        ]
    )

    assert code == 2
    assert "namespace:name" in capsys.readouterr().err
