"""Non-interactive default rules for laying out blobs in a data square."""

from __future__ import annotations

import math


def _round_up_power_of_two(value: int) -> int:
    result = 1
    while result < value:
        result <<= 1
    return result


def _ceil_sqrt(value: int) -> int:
    if value <= 0:
        return 0
    return math.isqrt(value - 1) + 1


def min_square_size(share_count: int) -> int:
    """Return the smallest power-of-two square width holding ``share_count`` shares."""
    return _round_up_power_of_two(_ceil_sqrt(share_count))


def round_up_by(cursor: int, v: int) -> int:
    """Round ``cursor`` up to the next multiple of ``v``."""
    if cursor == 0 or cursor % v == 0:
        return cursor
    return (cursor // v + 1) * v


def _is_start_of_row(cursor: int, square_size: int) -> bool:
    return cursor == 0 or cursor % square_size == 0


def next_multiple_of_blob_min_square_size(
    cursor: int, blob_len: int, square_size: int
) -> tuple[int, bool]:
    """Return the next index aligned to the blob's minimum square size and
    whether the whole blob fits in that row."""
    if _is_start_of_row(cursor, square_size):
        return cursor, True

    blob_min = min_square_size(blob_len)
    start_of_next_row = (cursor // square_size + 1) * square_size
    cursor = round_up_by(cursor, blob_min)
    if cursor + blob_len <= start_of_next_row:
        return cursor, True
    if cursor + blob_min <= start_of_next_row:
        return cursor, False
    return start_of_next_row, False


def blob_shares_used_non_interactive_defaults(
    cursor: int, square_size: int, *blob_share_lens: int
) -> tuple[int, list[int]]:
    """Return the shares used by the blobs (padding included) and each blob's start index."""
    start = cursor
    indexes: list[int] = []
    for blob_len in blob_share_lens:
        cursor, _ = next_multiple_of_blob_min_square_size(cursor, blob_len, square_size)
        indexes.append(cursor)
        cursor += blob_len
    return cursor - start, indexes


def fits_in_square(cursor: int, square_size: int, *blob_share_lens: int) -> tuple[bool, int]:
    """Return whether the blobs fit in the square from ``cursor`` and the shares they use."""
    if not blob_share_lens:
        return cursor <= square_size * square_size, 0
    cursor, _ = next_multiple_of_blob_min_square_size(cursor, blob_share_lens[0], square_size)
    used, _ = blob_shares_used_non_interactive_defaults(cursor, square_size, *blob_share_lens)
    return cursor + used <= square_size * square_size, used