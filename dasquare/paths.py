"""Paths to the subtree roots that make up a blob's share commitment."""

from __future__ import annotations

from dataclasses import dataclass

from .layout import min_square_size, next_multiple_of_blob_min_square_size
from .nmt_caching import WalkInstruction


@dataclass(frozen=True)
class Coord:
    """A tree node identified by depth (root is 0) and position (leftmost is 0).

        Depth       Position
        0              0
                      / \\
        1           0     1
                   /\\     /\\
        2         0  1   2  3
    """

    depth: int
    position: int

    def climb(self) -> Coord:
        """Return the parent of this node."""
        return Coord(self.depth - 1, self.position // 2)

    def can_climb_right(self, min_depth: int) -> bool:
        """Return whether the next climb goes right without passing ``min_depth``."""
        return self.position % 2 == 0 and self.depth > min_depth


@dataclass(frozen=True)
class CommitmentPath:
    """Walk instructions from a row root down to one subtree root."""

    instructions: tuple[WalkInstruction, ...]
    row: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "instructions", tuple(self.instructions))


def gen_sub_tree_root_path(depth: int, pos: int) -> list[WalkInstruction]:
    """Return the walk from the root to the node at ``depth`` and ``pos``."""
    return [
        WalkInstruction.RIGHT if pos & (1 << bit) else WalkInstruction.LEFT
        for bit in range(depth - 1, -1, -1)
    ]


def calculate_sub_tree_root_coordinates(
    max_depth: int, min_depth: int, start: int, end: int
) -> list[Coord]:
    """Return the subtree roots covering leaves ``start`` to ``end`` (exclusive).

    Subtree roots never sit above ``min_depth``; leaves sit at ``max_depth``.
    """
    if end <= start:
        raise ValueError(f"end {end} must be greater than start {start}")

    coords: list[Coord] = []
    leaf = start
    node = Coord(max_depth, start)
    last_node = node
    last_leaf = leaf
    node_range = 1

    while True:
        if leaf + 1 == end:
            coords.append(node)
            return coords
        if leaf + 1 > end:
            # climbed too high: the previous node is the subtree root
            coords.append(last_node)
            leaf = last_leaf + 1
        elif not node.can_climb_right(min_depth):
            coords.append(node)
            leaf += 1
        else:
            last_leaf, last_node = leaf, node
            leaf += node_range
            node_range *= 2
            node = node.climb()
            continue
        # restart from the next uncovered leaf
        last_node, last_leaf = node, leaf
        node = Coord(max_depth, leaf)
        node_range = 1


def calculate_commitment_paths(
    square_size: int, start: int, blob_share_len: int
) -> list[CommitmentPath]:
    """Return the paths to every subtree root in a blob's commitment.

    The start index is first moved according to the non-interactive default rules.
    """
    start, _ = next_multiple_of_blob_min_square_size(start, blob_share_len, square_size)
    start_row = start // square_size
    end_row = (start + blob_share_len - 1) // square_size
    normalized_start = start % square_size
    normalized_end = start + blob_share_len - end_row * square_size
    max_depth = square_size.bit_length() - 1
    sub_tree_root_max_height = min_square_size(blob_share_len).bit_length() - 1
    min_depth = max_depth - sub_tree_root_max_height

    paths: list[CommitmentPath] = []
    for row in range(start_row, end_row + 1):
        row_start = normalized_start if row == start_row else 0
        row_end = normalized_end if row == end_row else square_size
        for coord in calculate_sub_tree_root_coordinates(
            max_depth, min_depth, row_start, row_end
        ):
            paths.append(
                CommitmentPath(
                    instructions=tuple(gen_sub_tree_root_path(coord.depth, coord.position)),
                    row=row,
                )
            )
    return paths