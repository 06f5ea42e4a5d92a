"""Simple binary Merkle tree over byte strings (RFC 6962 style hashing)."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

_LEAF_PREFIX = b"\x00"
_INNER_PREFIX = b"\x01"


def empty_hash() -> bytes:
    """Return the root of a tree with no leaves: SHA-256 of the empty string."""
    return hashlib.sha256(b"").digest()


def leaf_hash(leaf: bytes) -> bytes:
    """Hash a leaf, domain separated by a 0x00 prefix."""
    return hashlib.sha256(_LEAF_PREFIX + bytes(leaf)).digest()


def inner_hash(left: bytes, right: bytes) -> bytes:
    """Hash two child nodes, domain separated by a 0x01 prefix."""
    return hashlib.sha256(_INNER_PREFIX + bytes(left) + bytes(right)).digest()


def _split_point(length: int) -> int:
    """Largest power of two strictly less than ``length`` (``length`` > 1)."""
    return 1 << ((length - 1).bit_length() - 1)


def _root(items: list[bytes]) -> bytes:
    if not items:
        return empty_hash()
    if len(items) == 1:
        return leaf_hash(items[0])
    k = _split_point(len(items))
    return inner_hash(_root(items[:k]), _root(items[k:]))


def hash_from_byte_slices(items: Iterable[bytes] | None) -> bytes:
    """Compute the Merkle root of the given leaves."""
    return _root(list(items or ()))