"""Checks on share ranges used for inclusion proofs."""

from __future__ import annotations

from collections.abc import Sequence

from .namespace import NAMESPACE_SIZE, Namespace, from_bytes


def _share_namespace(share: bytes) -> Namespace:
    return from_bytes(bytes(share[:NAMESPACE_SIZE]))


def parse_namespace(raw_shares: Sequence[bytes], start_share: int, end_share: int) -> Namespace:
    """Validate a share range and return the single namespace it belongs to.

    The namespace check covers shares from ``start_share`` up to, but not
    including, ``end_share``.
    """
    if start_share < 0:
        raise ValueError(f"start share {start_share} should be positive")
    if end_share < 0:
        raise ValueError(f"end share {end_share} should be positive")
    if end_share < start_share:
        raise ValueError(
            f"end share {end_share} cannot be lower than starting share {start_share}"
        )
    if end_share >= len(raw_shares):
        raise ValueError(
            f"end share {end_share} is higher than block shares {len(raw_shares)}"
        )

    start_namespace = _share_namespace(raw_shares[start_share])
    for offset, share in enumerate(raw_shares[start_share:end_share]):
        namespace = _share_namespace(share)
        if namespace.to_bytes() != start_namespace.to_bytes():
            raise ValueError(
                f"shares range contain different namespaces at index {offset}: "
                f"{start_namespace.to_bytes().hex()} and {namespace.to_bytes().hex()}"
            )
    return start_namespace