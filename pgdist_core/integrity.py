"""Checksum token extraction and digest verification."""

from __future__ import annotations

import hashlib
import re

from .errors import AssetHashNotFound, IntegrityMismatch

_SHA256_RE = re.compile(r"[0-9a-f]{64}")


def extract_hash(text: str, asset_name: str) -> str:
    """Return the first 64-character lowercase hex token found in ``text``."""

    match = _SHA256_RE.search(text or "")
    if match is None:
        raise AssetHashNotFound(asset_name)
    return match.group(0)


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def verify_digest(data: bytes, expected: str, asset_name: str) -> str:
    """Recompute the digest of ``data`` and compare it to ``expected``.

    Returns the computed digest; raises :class:`IntegrityMismatch` on mismatch.
    """

    actual = sha256_hex(data)
    if actual != expected.lower():
        raise IntegrityMismatch(asset_name, expected, actual)
    return actual
