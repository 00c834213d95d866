"""Unit tests for checksum token extraction and digest verification."""

from __future__ import annotations

import hashlib

import pytest

from pgdist_core import AssetHashNotFound, IntegrityMismatch
from pgdist_core.integrity import extract_hash, sha256_hex, verify_digest

ASSET = "postgresql-16.1.0-x86_64-unknown-linux-gnu.tar.gz"
DIGEST = hashlib.sha256(b"archive").hexdigest()


@pytest.mark.parametrize(
    "body",
    [
        f"{DIGEST}  {ASSET}\n",
        f"{DIGEST}\n",
        f"SHA256 ({ASSET}) = {DIGEST}",
        f"\n\n   {DIGEST}   ",
    ],
)
def test_extract_hash_ignores_surrounding_text(body: str) -> None:
    assert extract_hash(body, ASSET) == DIGEST


def test_extract_hash_requires_lowercase_hex_token() -> None:
    with pytest.raises(AssetHashNotFound) as excinfo:
        extract_hash(f"{DIGEST.upper()}  {ASSET}", ASSET)
    assert excinfo.value.name == ASSET


@pytest.mark.parametrize("body", ["", "not a checksum", "abc123  " + ASSET, "f" * 63])
def test_extract_hash_missing_token(body: str) -> None:
    with pytest.raises(AssetHashNotFound):
        extract_hash(body, ASSET)


def test_verify_digest_accepts_matching_bytes() -> None:
    assert verify_digest(b"archive", DIGEST, ASSET) == DIGEST
    assert sha256_hex(b"archive") == DIGEST


def test_verify_digest_rejects_tampered_bytes() -> None:
    with pytest.raises(IntegrityMismatch) as excinfo:
        verify_digest(b"tampered", DIGEST, ASSET)

    assert excinfo.value.name == ASSET
    assert excinfo.value.expected == DIGEST
    assert excinfo.value.actual == hashlib.sha256(b"tampered").hexdigest()


def test_extraction_and_verification_are_separate_steps() -> None:
    token = extract_hash(f"{DIGEST}  {ASSET}\n", ASSET)

    with pytest.raises(IntegrityMismatch):
        verify_digest(b"other", token, ASSET)
