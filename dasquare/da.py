"""Data availability header: the row and column roots of an extended data square.

The original block data is split into shares and arranged in a square of
width ``k``; erasure coding extends it into a square of width ``2k``. The
header holds one Merkle root per row and per column of the extended square,
and its hash (the data root) commits to all of them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .merkle import hash_from_byte_slices

DEFAULT_MAX_SQUARE_SIZE = 128
DEFAULT_MIN_SQUARE_SIZE = 1

MAX_EXTENDED_SQUARE_WIDTH = DEFAULT_MAX_SQUARE_SIZE * 2
MIN_EXTENDED_SQUARE_WIDTH = DEFAULT_MIN_SQUARE_SIZE * 2

HASH_SIZE = 32


class DataAvailabilityHeaderError(ValueError):
    """Raised when a data availability header is malformed."""


def _as_roots(roots: Iterable[bytes] | None) -> list[bytes]:
    return [bytes(root) if root is not None else b"" for root in (roots or ())]


@dataclass
class DataAvailabilityHeader:
    """Row and column roots of an extended data square, with a memoized hash."""

    row_roots: list[bytes] = field(default_factory=list)
    column_roots: list[bytes] = field(default_factory=list)
    _hash: bytes = field(default=b"", compare=False, repr=False)

    def __post_init__(self) -> None:
        self.row_roots = _as_roots(self.row_roots)
        self.column_roots = _as_roots(self.column_roots)
        self._hash = bytes(self._hash)

    def hash(self) -> bytes:
        """Return the Merkle root of the row roots followed by the column roots."""
        if self._hash:
            return self._hash
        rows_count = len(self.row_roots)
        columns = self.column_roots[:rows_count]
        columns += [b""] * (rows_count - len(columns))
        self._hash = hash_from_byte_slices(self.row_roots + columns)
        return self._hash

    def equals(self, other: DataAvailabilityHeader | None) -> bool:
        """Return whether both headers have the same hash."""
        other_hash = other.hash() if other is not None else hash_from_byte_slices(None)
        return self.hash() == other_hash

    def validate_basic(self) -> None:
        """Run stateless checks, raising DataAvailabilityHeaderError on failure."""
        rows, cols = len(self.row_roots), len(self.column_roots)
        if cols < MIN_EXTENDED_SQUARE_WIDTH or rows < MIN_EXTENDED_SQUARE_WIDTH:
            raise DataAvailabilityHeaderError(
                "minimum valid DataAvailabilityHeader has at least "
                f"{MIN_EXTENDED_SQUARE_WIDTH} row and column roots"
            )
        if cols > MAX_EXTENDED_SQUARE_WIDTH or rows > MAX_EXTENDED_SQUARE_WIDTH:
            raise DataAvailabilityHeaderError(
                "maximum valid DataAvailabilityHeader has at most "
                f"{MAX_EXTENDED_SQUARE_WIDTH} row and column roots"
            )
        if cols != rows:
            raise DataAvailabilityHeaderError(
                f"unequal number of row and column roots: row {rows} col {cols}"
            )
        digest = self.hash()
        if digest and len(digest) != HASH_SIZE:
            raise DataAvailabilityHeaderError(
                f"wrong hash: expected size to be {HASH_SIZE} bytes, got {len(digest)} bytes"
            )

    def is_zero(self) -> bool:
        """Return whether the header lacks row or column roots."""
        return not self.column_roots or not self.row_roots

    def to_dict(self) -> dict[str, list[bytes]]:
        """Return the header as a mapping of its root lists."""
        return {
            "row_roots": list(self.row_roots),
            "column_roots": list(self.column_roots),
        }

    def __str__(self) -> str:
        return self.hash().hex().upper()


def from_dict(data: Mapping[str, Any] | None) -> DataAvailabilityHeader:
    """Build a header from a mapping made by ``to_dict`` and validate it."""
    if data is None:
        raise DataAvailabilityHeaderError("nil DataAvailabilityHeader")
    dah = DataAvailabilityHeader(
        row_roots=data.get("row_roots", []),
        column_roots=data.get("column_roots", []),
    )
    dah.validate_basic()
    return dah