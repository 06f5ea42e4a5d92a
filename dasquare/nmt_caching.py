"""Caches of the inner nodes of row trees, used to find subtree roots."""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable, Iterable

from .da import DataAvailabilityHeader


class WalkInstruction(enum.Enum):
    """Direction to take while walking down a binary tree."""

    LEFT = False
    RIGHT = True


class SubTreeRootCacher:
    """Records every inner node of a tree as a map from hash to its two children.

    Leaves are not recorded, only inner nodes.
    """

    def __init__(self) -> None:
        self.cache: dict[bytes, tuple[bytes, bytes]] = {}

    def visit(self, hash: bytes, *children: bytes) -> None:
        """Node visitor called by a tree while it computes its root."""
        if len(children) == 2:
            self.cache[bytes(hash)] = (bytes(children[0]), bytes(children[1]))
        elif len(children) != 1:
            raise ValueError("unexpected visit")

    def walk(self, root: bytes, path: Iterable[WalkInstruction | bool]) -> bytes:
        """Follow ``path`` down from ``root`` and return the node reached."""
        node = bytes(root)
        for step in path:
            children = self.cache.get(node)
            if children is None:
                raise LookupError(f"did not find sub tree root: {node.hex()}")
            node = children[1] if WalkInstruction(bool(step.value if isinstance(step, WalkInstruction) else step)) is WalkInstruction.RIGHT else children[0]
        return node


class EDSSubTreeRootCacher:
    """Keeps one SubTreeRootCacher per row of an extended data square."""

    def __init__(self, square_size: int) -> None:
        self.square_size = square_size
        self._lock = threading.RLock()
        self._caches: dict[int, SubTreeRootCacher] = {}

    def row_visitor(self, row_index: int) -> Callable[..., None]:
        """Start a fresh cache for a row and return the visitor to feed it."""
        cacher = SubTreeRootCacher()
        with self._lock:
            self._caches[row_index] = cacher
        return cacher.visit

    def get_sub_tree_root(
        self,
        dah: DataAvailabilityHeader,
        row: int,
        path: Iterable[WalkInstruction | bool],
    ) -> bytes:
        """Walk the tree of ``row`` from its root in ``dah`` along ``path``."""
        with self._lock:
            count = len(self._caches)
            if count != len(dah.row_roots):
                raise ValueError(
                    "data availability header has unexpected number of row roots: "
                    f"expected {count} got {len(dah.row_roots)}"
                )
            if row >= count:
                raise ValueError(f"row exceeds range of cache: max {count} got {row}")
            cacher = self._caches.get(row)
            if cacher is None:
                raise LookupError(f"no cached tree for row {row}")
            return cacher.walk(dah.row_roots[row], path)