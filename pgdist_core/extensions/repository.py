"""The capability every extension repository implements."""

from __future__ import annotations

import io
import logging
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath

from pgdist_core.errors import ExtractionError
from pgdist_core.version import Version

from .model import AvailableExtension

logger = logging.getLogger(__name__)

LIBRARY_SUFFIXES = (".so", ".dylib", ".dll")
EXTENSION_SUFFIXES = (".control", ".sql")


class Repository(ABC):
    """Lists, fetches and installs extensions from one catalog."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Namespace under which the repository is registered."""

    @abstractmethod
    def get_available_extensions(self) -> list[AvailableExtension]:
        """Return the extensions this repository can install."""

    @abstractmethod
    def get_archive(self, postgresql_version: str, name: str, version: Version) -> tuple[Version, bytes]:
        """Resolve ``name`` under ``version`` and return the verified archive."""

    @abstractmethod
    def install(self, name: str, library_dir: Path, extension_dir: Path, archive: bytes) -> list[Path]:
        """Write the archive contents and return the paths written."""


def install_zip_bundle(archive: bytes, library_dir: Path, extension_dir: Path) -> list[Path]:
    """Route zip entries to the library or extension directory by suffix.

    Only the file name of each entry is kept; entries with other suffixes
    are ignored.
    """

    files: list[Path] = []
    try:
        with zipfile.ZipFile(io.BytesIO(archive)) as bundle:
            for info in bundle.infolist():
                if info.is_dir():
                    continue
                file_name = PurePosixPath(info.filename.replace("\\", "/")).name
                if file_name.endswith(LIBRARY_SUFFIXES):
                    destination = Path(library_dir) / file_name
                elif file_name.endswith(EXTENSION_SUFFIXES):
                    destination = Path(extension_dir) / file_name
                else:
                    logger.debug("ignoring bundle entry %s", info.filename)
                    continue
                destination.write_bytes(bundle.read(info))
                files.append(destination)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ExtractionError(f"failed to install zip bundle: {exc}") from exc
    return files
