import pytest

from dasquare.nmt_caching import WalkInstruction
from dasquare.paths import (
    CommitmentPath,
    Coord,
    calculate_commitment_paths,
    calculate_sub_tree_root_coordinates,
    gen_sub_tree_root_path,
)

L = WalkInstruction.LEFT
R = WalkInstruction.RIGHT


def C(depth, position):
    return Coord(depth=depth, position=position)


COORD_CASES = [
    ("first four shares of an 8 leaf tree", 0, 4, 3, 1, [C(1, 0)]),
    ("second set of four shares of an 8 leaf tree", 4, 8, 3, 1, [C(1, 1)]),
    ("middle 2 shares of an 8 leaf tree", 3, 5, 3, 3, [C(3, 3), C(3, 4)]),
    ("third lone share of an 8 leaf tree", 3, 4, 3, 3, [C(3, 3)]),
    ("middle 3 shares of an 8 leaf tree", 3, 6, 3, 2, [C(3, 3), C(2, 2)]),
    ("middle 6 shares of an 8 leaf tree", 1, 7, 3, 2,
     [C(3, 1), C(2, 1), C(2, 2), C(3, 6)]),
    ("middle 6 shares of an 8 leaf tree with minDepth 3", 1, 7, 3, 3,
     [C(3, 1), C(3, 2), C(3, 3), C(3, 4), C(3, 5), C(3, 6)]),
    ("first 5 shares of an 8 leaf tree", 0, 5, 3, 1, [C(1, 0), C(3, 4)]),
    ("first 7 shares of an 8 leaf tree", 0, 7, 3, 1, [C(1, 0), C(2, 2), C(3, 6)]),
    ("all shares of an 8 leaf tree", 0, 8, 3, 0, [C(0, 0)]),
    ("first 32 shares of a 128 leaf tree", 0, 32, 7, 2, [C(2, 0)]),
    ("first 33 shares of a 128 leaf tree", 0, 33, 7, 2, [C(2, 0), C(7, 32)]),
    ("first 31 shares of a 128 leaf tree", 0, 31, 7, 3,
     [C(3, 0), C(4, 2), C(5, 6), C(6, 14), C(7, 30)]),
    ("first 64 shares of a 128 leaf tree", 0, 64, 7, 1, [C(1, 0)]),
    ("single leaf square size 4", 0, 1, 2, 2, [C(2, 0)]),
    ("first 19 shares of a 64 x 64 square", 0, 19, 6, 3,
     [C(3, 0), C(3, 1), C(5, 8), C(6, 18)]),
]


@pytest.mark.parametrize(
    "name,start,end,max_depth,min_depth,expected",
    COORD_CASES,
    ids=[case[0] for case in COORD_CASES],
)
def test_calculate_sub_tree_root_coordinates(name, start, end, max_depth, min_depth, expected):
    assert calculate_sub_tree_root_coordinates(max_depth, min_depth, start, end) == expected


def test_calculate_sub_tree_root_coordinates_rejects_empty_range():
    with pytest.raises(ValueError):
        calculate_sub_tree_root_coordinates(3, 1, 4, 4)


@pytest.mark.parametrize(
    "depth,pos,expected",
    [
        (2, 0, [L, L]),
        (0, 0, []),
        (3, 0, [L, L, L]),
        (3, 1, [L, L, R]),
        (3, 2, [L, R, L]),
        (5, 16, [R, L, L, L, L]),
    ],
)
def test_gen_sub_tree_root_path(depth, pos, expected):
    assert gen_sub_tree_root_path(depth, pos) == expected


def P(instructions, row):
    return CommitmentPath(instructions=tuple(instructions), row=row)


@pytest.mark.parametrize(
    "square_size,start,blob_len,expected",
    [
        (2, 0, 1, [P([L], 0)]),
        (2, 2, 2, [P([], 1)]),
        (2, 1, 2, [P([], 1)]),
        (4, 2, 2, [P([R], 0)]),
        (4, 2, 4, [P([R], 0), P([L], 1)]),
        (4, 3, 4, [P([L], 1), P([R], 1)]),
        (4, 2, 9, [P([], 1), P([], 2), P([L, L], 3)]),
        (8, 3, 16, [P([R], 0), P([L], 1), P([R], 1), P([L], 2)]),
        (64, 144, 32, [
            P([L, R, L], 2),
            P([L, R, R], 2),
            P([R, L, L], 2),
            P([R, L, R], 2),
        ]),
        (64, 4032, 33, [
            P([L, L, L], 63),
            P([L, L, R], 63),
            P([L, R, L], 63),
            P([L, R, R], 63),
            P([R, L, L, L, L, L], 63),
        ]),
        (64, 4032, 63, [
            P([L, L, L], 63),
            P([L, L, R], 63),
            P([L, R, L], 63),
            P([L, R, R], 63),
            P([R, L, L], 63),
            P([R, L, R], 63),
            P([R, R, L], 63),
            P([R, R, R, L], 63),
            P([R, R, R, R, L], 63),
            P([R, R, R, R, R, L], 63),
        ]),
    ],
)
def test_calculate_commitment_paths(square_size, start, blob_len, expected):
    assert calculate_commitment_paths(square_size, start, blob_len) == expected


def test_coord_climb_and_direction():
    node = C(3, 6)
    assert node.climb() == C(2, 3)
    assert node.can_climb_right(0) is True
    assert C(3, 5).can_climb_right(0) is False
    assert C(1, 0).can_climb_right(1) is False