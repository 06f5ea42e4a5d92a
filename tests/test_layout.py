import pytest

from dasquare.layout import (
    blob_shares_used_non_interactive_defaults,
    fits_in_square,
    min_square_size,
    next_multiple_of_blob_min_square_size,
    round_up_by,
)

MAX_SQUARE = 128


@pytest.mark.parametrize(
    "cursor,square_size,expected,blob_lens,indexes",
    [
        (2, 4, 1, [1], [2]),
        (2, 2, 1, [1], [2]),
        (3, 4, 8, [3, 3], [4, 8]),
        (0, 8, 8, [8], [0]),
        (0, 8, 7, [7], [0]),
        (0, 8, 7, [3, 3], [0, 4]),
        (1, 8, 8, [3, 3], [2, 6]),
        (1, 8, 32, [1] * 32, list(range(1, 33))),
        (3, 8, 16, [5, 7], [4, 12]),
        (0, 8, 29, [5, 5, 5, 5], [0, 8, 16, 24]),
        (0, 8, 10, [10], [0]),
        (0, 8, 22, [10, 10], [0, 12]),
        (1, 8, 25, [10, 10], [4, 16]),
        (2, 8, 24, [10, 10], [4, 16]),
        (0, 8, 55, [21, 31], [0, 24]),
        (0, 8, 128, [64, 64], [0, 64]),
        (0, MAX_SQUARE, 1000, [1000], [0]),
        (0, MAX_SQUARE, MAX_SQUARE + 1, [MAX_SQUARE + 1], [0]),
        (1, 128, 399, [128, 128, 128], [16, 144, 272]),
        (1024, MAX_SQUARE, 32, [32], [1024]),
    ],
)
def test_blob_shares_used(cursor, square_size, expected, blob_lens, indexes):
    used, got_indexes = blob_shares_used_non_interactive_defaults(cursor, square_size, *blob_lens)
    assert used == expected
    assert got_indexes == indexes


@pytest.mark.parametrize(
    "blobs,start,size,fits",
    [
        ([2], 2, 4, True),
        ([10] * 10, 0, 4, False),
        ([1] * 15, 0, 4, True),
        ([1] * 15, 2, 4, False),
        ([3, 9, 3, 7, 8, 3, 7, 8], 1, 8, True),
        ([3, 9, 3, 7, 8, 3, 7, 8], 6, 8, True),
        ([], 5, 2, False),
        ([], 4, 2, True),
        ([], 16, 4, True),
        ([], 17, 4, False),
        ([], 18, 4, False),
    ],
)
def test_fits_in_square(blobs, start, size, fits):
    res, _ = fits_in_square(start, size, *blobs)
    assert res == fits


def test_fits_in_square_no_blobs_uses_nothing():
    assert fits_in_square(3, 4) == (True, 0)


@pytest.mark.parametrize(
    "cursor,blob_len,square_size,fits,expected_index",
    [
        (0, 4, 4, True, 0),
        (1, 2, 4, True, 2),
        (2, 2, 4, True, 2),
        (3, 4, 8, True, 4),
        (3, 5, 8, False, 4),
        (3, 2, 8, True, 4),
        (1, 12, 16, True, 4),
        (10291, 1, 128, True, 10291),
        (11, 2, 8, True, 12),
        (11, 11, 8, False, 12),
    ],
)
def test_next_multiple_of_blob_min_square_size(cursor, blob_len, square_size, fits, expected_index):
    res, got_fits = next_multiple_of_blob_min_square_size(cursor, blob_len, square_size)
    assert got_fits == fits
    assert res == expected_index


@pytest.mark.parametrize(
    "cursor,v,expected",
    [
        (1, 2, 2),
        (2, 2, 2),
        (0, 2, 0),
        (5, 2, 6),
        (8, 16, 16),
        (33, 1, 33),
        (32, 16, 32),
        (33, 16, 48),
    ],
)
def test_round_up_by(cursor, v, expected):
    assert round_up_by(cursor, v) == expected


@pytest.mark.parametrize(
    "share_count,want",
    [(0, 1), (1, 1), (2, 2), (3, 2), (4, 2), (5, 4), (16, 4), (17, 8)],
)
def test_min_square_size(share_count, want):
    assert min_square_size(share_count) == want