"""Typed errors raised by the archive pipeline."""

from __future__ import annotations


class ArchiveError(Exception):
    """Base class for archive resolution, fetch and extraction failures."""


class VersionParseError(ArchiveError, ValueError):
    """Raised when a version string or catalog tag is malformed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid version: {value!r}")
        self.value = value


class ReleaseNotFound(ArchiveError):
    """No catalog release satisfies the requested version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"release not found for version {version}")
        self.version = version


class AssetNotFound(ArchiveError):
    """The archive or its checksum companion is missing from a release."""

    def __init__(self, name: str) -> None:
        super().__init__(f"asset not found: {name}")
        self.name = name


class AssetHashNotFound(ArchiveError):
    """The checksum asset body holds no recognizable digest."""

    def __init__(self, name: str) -> None:
        super().__init__(f"hash not found for asset: {name}")
        self.name = name


class IntegrityMismatch(ArchiveError):
    """Digest of the fetched bytes differs from the published digest."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        super().__init__(
            f"checksum mismatch for {name}: expected {expected} but got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class TransportError(ArchiveError):
    """Network failure, timeout or unexpected HTTP status."""

    def __init__(self, message: str, *, url: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ExtractionError(ArchiveError):
    """Malformed archive entry, path escape or filesystem failure while unpacking."""


class Unexpected(ArchiveError):
    """Invariant violation that does not fit any other error kind."""
