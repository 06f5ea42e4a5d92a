"""Namespaces: a one-byte version followed by a 32-byte ID.

Shares carry a universal prefix of namespace version (1 byte), namespace ID
(32 bytes) and an info byte; version 0 IDs start with 22 zero bytes, leaving
10 bytes for a user-chosen ID.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

NAMESPACE_VERSION_SIZE = 1
NAMESPACE_ID_SIZE = 32
NAMESPACE_SIZE = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE

NAMESPACE_VERSION_ZERO = 0
NAMESPACE_VERSION_ZERO_PREFIX_SIZE = 22
NAMESPACE_VERSION_ZERO_ID_SIZE = NAMESPACE_ID_SIZE - NAMESPACE_VERSION_ZERO_PREFIX_SIZE
NAMESPACE_VERSION_ZERO_PREFIX = bytes(NAMESPACE_VERSION_ZERO_PREFIX_SIZE)


class NamespaceError(ValueError):
    """Raised for an unsupported or invalid namespace."""


@dataclass(frozen=True)
class Namespace:
    """A namespace version together with its ID."""

    version: int
    id: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", bytes(self.id))

    def to_bytes(self) -> bytes:
        """Return the version byte followed by the ID."""
        return bytes([self.version]) + self.id

    def validate_blob_namespace(self) -> None:
        """Raise NamespaceError if this namespace cannot hold blob data."""
        if self.is_reserved():
            raise NamespaceError(
                f"invalid blob namespace: {self.to_bytes().hex()} cannot use a reserved "
                f"namespace ID, want > {MAX_RESERVED_NAMESPACE.to_bytes().hex()}"
            )
        if self.is_parity_shares():
            raise NamespaceError(
                f"invalid blob namespace: {self.to_bytes().hex()} cannot use parity shares namespace ID"
            )
        if self.is_tail_padding():
            raise NamespaceError(
                f"invalid blob namespace: {self.to_bytes().hex()} cannot use tail padding namespace ID"
            )

    def is_reserved(self) -> bool:
        return self.to_bytes() <= MAX_RESERVED_NAMESPACE.to_bytes()

    def is_parity_shares(self) -> bool:
        return self.to_bytes() == PARITY_SHARES_NAMESPACE.to_bytes()

    def is_tail_padding(self) -> bool:
        return self.to_bytes() == TAIL_PADDING_NAMESPACE.to_bytes()

    def is_reserved_padding(self) -> bool:
        return self.to_bytes() == RESERVED_PADDING_NAMESPACE.to_bytes()

    def is_tx(self) -> bool:
        return self.to_bytes() == TX_NAMESPACE.to_bytes()

    def is_pay_for_blob(self) -> bool:
        return self.to_bytes() == PAY_FOR_BLOB_NAMESPACE.to_bytes()


def _validate_version(version: int) -> None:
    if version != NAMESPACE_VERSION_ZERO:
        raise NamespaceError(f"unsupported namespace version {version}")


def _validate_id(version: int, id: bytes) -> None:
    if len(id) != NAMESPACE_ID_SIZE:
        raise NamespaceError(
            f"unsupported namespace id length: id {id.hex()} must be "
            f"{NAMESPACE_ID_SIZE} bytes but it was {len(id)} bytes"
        )
    if version == NAMESPACE_VERSION_ZERO and not id.startswith(NAMESPACE_VERSION_ZERO_PREFIX):
        raise NamespaceError(
            f"unsupported namespace id with version {version}. ID {id.hex()} must start "
            f"with {len(NAMESPACE_VERSION_ZERO_PREFIX)} leading zeros"
        )


def new_namespace(version: int, id: bytes) -> Namespace:
    """Build a namespace, raising NamespaceError if version or ID is unsupported."""
    id = bytes(id)
    _validate_version(version)
    _validate_id(version, id)
    return Namespace(version, id)


def new_v0(id: bytes) -> Namespace:
    """Build a version 0 namespace from a 10-byte user ID."""
    id = bytes(id)
    if len(id) != NAMESPACE_VERSION_ZERO_ID_SIZE:
        raise NamespaceError(
            f"invalid namespace id length: {len(id)} must be {NAMESPACE_VERSION_ZERO_ID_SIZE}"
        )
    return new_namespace(NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_ZERO_PREFIX + id)


def from_bytes(data: bytes) -> Namespace:
    """Parse a namespace from its 33-byte encoding."""
    data = bytes(data)
    if len(data) != NAMESPACE_SIZE:
        raise NamespaceError(f"invalid namespace length: {len(data)} must be {NAMESPACE_SIZE}")
    return new_namespace(data[0], data[1:])


TX_NAMESPACE = new_v0(bytes([0] * 9 + [1]))
INTERMEDIATE_STATE_ROOTS_NAMESPACE = new_v0(bytes([0] * 9 + [2]))
EVIDENCE_NAMESPACE = new_v0(bytes([0] * 9 + [3]))
PAY_FOR_BLOB_NAMESPACE = new_v0(bytes([0] * 9 + [4]))
RESERVED_PADDING_NAMESPACE = new_v0(bytes([0] * 9 + [255]))
MAX_RESERVED_NAMESPACE = new_v0(bytes([0] * 9 + [255]))
TAIL_PADDING_NAMESPACE = new_v0(bytes([0xFF] * 9 + [0xFE]))
PARITY_SHARES_NAMESPACE = new_v0(bytes([0xFF] * 10))


def random_blob_namespace_id() -> bytes:
    """Return random bytes suitable as a version 0 user ID."""
    return secrets.token_bytes(NAMESPACE_VERSION_ZERO_ID_SIZE)


def random_blob_namespace() -> Namespace:
    """Return a random version 0 namespace that is valid for blobs."""
    while True:
        ns = new_v0(random_blob_namespace_id())
        try:
            ns.validate_blob_namespace()
        except NamespaceError:
            continue
        return ns


def random_blob_namespaces(count: int) -> list[Namespace]:
    """Return ``count`` random blob namespaces."""
    return [random_blob_namespace() for _ in range(count)]