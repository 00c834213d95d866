"""Unpack gzip-compressed tar archives that share one top-level directory."""

from __future__ import annotations

import io
import logging
import os
import shutil
import tarfile
from pathlib import Path, PurePosixPath

from .errors import ExtractionError

logger = logging.getLogger(__name__)


def _inside(root: Path, target: Path) -> bool:
    return target == root or root in target.parents


def _stripped_path(member: tarfile.TarInfo, prefix: str | None) -> tuple[str, PurePosixPath]:
    """Split ``member.name`` into its root component and the remaining path."""

    name = member.name
    if not name:
        raise ExtractionError("archive entry has no path")
    path = PurePosixPath(name)
    if path.is_absolute():
        raise ExtractionError(f"absolute path in archive entry: {name}")
    parts = path.parts
    if not parts:
        raise ExtractionError(f"cannot determine root component of entry: {name!r}")
    if prefix is not None and parts[0] != prefix:
        raise ExtractionError(f"entry {name} does not start with shared root {prefix}")
    return parts[0], PurePosixPath(*parts[1:])


def _safe_target(root: Path, relative: PurePosixPath, name: str) -> Path:
    target = (root / relative).resolve()
    if not _inside(root, target):
        raise ExtractionError(f"path traversal blocked for archive entry: {name}")
    return target


def _write_symlink(root: Path, target: Path, member: tarfile.TarInfo) -> None:
    link = PurePosixPath(member.linkname)
    if link.is_absolute() or not _inside(root, (target.parent / link).resolve()):
        raise ExtractionError(
            f"symlink {member.name} -> {member.linkname} escapes the destination"
        )
    target.parent.mkdir(parents=True, exist_ok=True)
    if os.path.lexists(target):
        target.unlink()
    os.symlink(member.linkname, target)


def _write_file(archive: tarfile.TarFile, target: Path, member: tarfile.TarInfo) -> None:
    try:
        source = archive.extractfile(member)
    except KeyError as exc:
        raise ExtractionError(
            f"hard link {member.name} -> {member.linkname} has no target in the archive"
        ) from exc
    if source is None:
        raise ExtractionError(f"no content for archive entry: {member.name}")
    target.parent.mkdir(parents=True, exist_ok=True)
    with source, target.open("wb") as out:
        shutil.copyfileobj(source, out)
    if os.name == "posix":
        os.chmod(target, member.mode & 0o7777)


def extract(data: bytes, out_dir: Path) -> list[Path]:
    """Extract ``data`` into ``out_dir`` with each entry's root component stripped.

    Returns the files and links written. A failure part way leaves whatever
    was already written in place and raises :class:`ExtractionError`.

    Only directory entries create directories. A zero-size regular file is
    written as an empty file, not turned into a directory.
    """

    out_dir = Path(out_dir)
    written: list[Path] = []
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        root = out_dir.resolve()
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
            prefix: str | None = None
            for member in archive:
                prefix, relative = _stripped_path(member, prefix)
                target = _safe_target(root, relative, member.name)
                if member.isdir():
                    target.mkdir(parents=True, exist_ok=True)
                elif member.issym():
                    _write_symlink(root, target, member)
                    written.append(target)
                elif member.isfile() or member.islnk():
                    _write_file(archive, target, member)
                    written.append(target)
                else:
                    logger.warning("skipping special archive entry %s", member.name)
    except ExtractionError:
        logger.error("extraction into %s aborted after %d files", out_dir, len(written))
        raise
    except (tarfile.TarError, EOFError, OSError) as exc:
        logger.error("extraction into %s aborted after %d files", out_dir, len(written))
        raise ExtractionError(f"failed to extract archive into {out_dir}: {exc}") from exc

    logger.info("extracted %d files into %s", len(written), out_dir)
    return written
