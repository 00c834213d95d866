"""pgdist command line: resolve, fetch and extract archives, manage extensions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import pgdist_core
from pgdist_core import THESEUS_POSTGRESQL_BINARIES_URL, ArchiveError, Version
from pgdist_core import archive
from pgdist_core.extensions import get_available_extensions, install
from pgdist_plugins import PortalCorp

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pgdist", description=__doc__)
    parser.add_argument("--version", action="version", version=f"pgdist v{pgdist_core.__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="print the newest release matching a version")
    resolve.add_argument("requirement", help="MAJOR[.MINOR[.PATCH]]")
    resolve.add_argument("--url", default=THESEUS_POSTGRESQL_BINARIES_URL)

    fetch = sub.add_parser("fetch", help="download, verify and extract an archive")
    fetch.add_argument("requirement", help="MAJOR[.MINOR[.PATCH]]")
    fetch.add_argument("--out", required=True, type=Path, help="destination directory")
    fetch.add_argument("--url", default=THESEUS_POSTGRESQL_BINARIES_URL)
    fetch.add_argument("--target", default=None, help="target triple (defaults to this host)")

    ext = sub.add_parser("extensions", help="list or install extensions")
    ext_sub = ext.add_subparsers(dest="action", required=True)
    listing = ext_sub.add_parser("list")
    listing.add_argument("--format", choices=("text", "json"), default="text")
    inst = ext_sub.add_parser("install")
    inst.add_argument("qualified", help="namespace:name")
    inst.add_argument("--version", dest="ext_version", required=True)
    inst.add_argument("--postgresql-version", required=True)
    inst.add_argument("--library-dir", required=True, type=Path)
    inst.add_argument("--extension-dir", required=True, type=Path)
    return parser


def _initialize() -> None:
    pgdist_core.initialize()
    PortalCorp.initialize()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _initialize()

    try:
        if args.command == "resolve":
            print(archive.get_version(args.url, Version.parse(args.requirement)))
        elif args.command == "fetch":
            return _fetch(args)
        elif args.action == "list":
            return _list_extensions(args.format)
        else:
            return _install_extension(args)
    except ArchiveError as exc:
        print(f"[pgdist] {exc}", file=sys.stderr)
        return 1
    return 0


def _fetch(args: argparse.Namespace) -> int:
    version = Version.parse(args.requirement)
    if args.target:
        resolved, data = archive.get_archive_for_target(args.url, version, args.target)
    else:
        resolved, data = archive.get_archive(args.url, version)
    files = archive.extract(data, args.out)
    print(f"[pgdist] extracted {resolved} ({len(files)} files) into {args.out}")
    return 0


def _list_extensions(fmt: str) -> int:
    extensions = get_available_extensions()
    if fmt == "json":
        print(json.dumps([ext.to_dict() for ext in extensions], indent=2))
        return 0
    for ext in extensions:
        print(f"{ext.qualified_name}\t{ext.description}")
    return 0


def _install_extension(args: argparse.Namespace) -> int:
    namespace, sep, name = args.qualified.partition(":")
    if not sep or not namespace or not name:
        print("[pgdist] expected namespace:name", file=sys.stderr)
        return 2
    files = install(
        namespace,
        name,
        Version.parse(args.ext_version),
        postgresql_version=args.postgresql_version,
        library_dir=args.library_dir,
        extension_dir=args.extension_dir,
    )
    for path in files:
        print(path)
    return 0
