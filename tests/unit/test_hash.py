"""Tests for hash module."""

import pytest
from hypothesis import given, strategies as st

from arbor.core.hash import (
    Algorithm,
    hash_string,
    hash_bytes,
    create_hasher,
)


def test_hash_string_xxhash():
    """Test xxhash string hashing."""
    result = hash_string("test", Algorithm.XXHASH64)
    assert isinstance(result, str)
    assert len(result) == 16  # xxhash64 produces 16 hex chars

    # Same input = same hash
    assert hash_string("test", Algorithm.XXHASH64) == result


def test_hash_string_sha256():
    """Test SHA256 string hashing."""
    result = hash_string("test", Algorithm.SHA256)
    assert len(result) == 64


def test_hash_string_truncate():
    """Test hash truncation."""
    full = hash_string("test", Algorithm.SHA256)
    truncated = hash_string("test", Algorithm.SHA256, truncate=16)

    assert len(truncated) == 16
    assert full.startswith(truncated)


def test_hash_bytes_matches_hash_string():
    """Bytes and utf-8 strings hash identically."""
    assert hash_bytes("päge".encode("utf-8")) == hash_string("päge")


def test_create_hasher_invalid():
    """Test invalid algorithm."""
    with pytest.raises(ValueError):
        create_hasher("invalid")  # type: ignore


@given(st.text(min_size=1, max_size=1000))
def test_hash_deterministic(text):
    """Property test: hashing is deterministic."""
    assert hash_string(text, Algorithm.XXHASH64) == hash_string(text, Algorithm.XXHASH64)
