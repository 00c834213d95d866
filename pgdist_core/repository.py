"""Interface implemented by every archive catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .version import Version


class ArchiveRepository(ABC):
    """A remote catalog that resolves versions and serves verified archives."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the catalog."""

    @abstractmethod
    def get_version(self, version: Version) -> Version:
        """Return the concrete version that best matches ``version``."""

    @abstractmethod
    def get_archive(self, version: Version, target: str) -> tuple[Version, bytes]:
        """Return the resolved version and the verified archive bytes for ``target``."""
