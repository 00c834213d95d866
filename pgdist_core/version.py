"""Partially specified semantic versions used as release constraints."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from .errors import VersionParseError

__all__ = ["Version"]

_VERSION_RE = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?$")


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class Version:
    """A version with a required major and optional minor/patch components.

    Absent components act as wildcards in :meth:`matches`. When ordering,
    an absent component sorts before any present one.
    """

    major: int
    minor: int | None = None
    patch: int | None = None

    def __post_init__(self) -> None:
        if self.major < 0:
            raise ValueError("major must be non-negative")
        if self.minor is None and self.patch is not None:
            raise ValueError("patch requires minor")
        for label, value in (("minor", self.minor), ("patch", self.patch)):
            if value is not None and value < 0:
                raise ValueError(f"{label} must be non-negative")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse ``MAJOR[.MINOR[.PATCH]]`` with an optional leading ``v``."""

        match = _VERSION_RE.match((text or "").strip())
        if match is None:
            raise VersionParseError(text)
        major, minor, patch = match.groups()
        return cls(
            int(major),
            int(minor) if minor is not None else None,
            int(patch) if patch is not None else None,
        )

    @property
    def is_exact(self) -> bool:
        return self.minor is not None and self.patch is not None

    def matches(self, other: "Version") -> bool:
        """Return ``True`` when every component present here equals ``other``'s."""

        if self.major != other.major:
            return False
        if self.minor is not None and self.minor != other.minor:
            return False
        if self.patch is not None and self.patch != other.patch:
            return False
        return True

    def _key(self) -> tuple[int, int, int]:
        return (
            self.major,
            -1 if self.minor is None else self.minor,
            -1 if self.patch is None else self.patch,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        parts = [str(self.major)]
        if self.minor is not None:
            parts.append(str(self.minor))
            if self.patch is not None:
                parts.append(str(self.patch))
        return ".".join(parts)
