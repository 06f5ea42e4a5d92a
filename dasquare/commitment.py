"""Share commitment of a blob laid out in the data square."""

from __future__ import annotations

from .da import DataAvailabilityHeader
from .merkle import hash_from_byte_slices
from .nmt_caching import EDSSubTreeRootCacher, WalkInstruction
from .paths import calculate_commitment_paths


def get_commitment(
    cacher: EDSSubTreeRootCacher,
    dah: DataAvailabilityHeader,
    start: int,
    blob_share_len: int,
) -> bytes:
    """Return the Merkle root of the subtree roots that cover the blob."""
    square_size = len(dah.row_roots) // 2
    if start + blob_share_len > square_size * square_size:
        raise ValueError("cannot get commitment for blob that doesn't fit in square")
    sub_tree_roots = [
        # walk left first: only the unextended half of each row holds the blob
        cacher.get_sub_tree_root(dah, path.row, [WalkInstruction.LEFT, *path.instructions])
        for path in calculate_commitment_paths(square_size, start, blob_share_len)
    ]
    return hash_from_byte_slices(sub_tree_roots)