# dasquare

This package provides building blocks for namespaced data squares. Shares are
laid out in a square, the square is extended, and its rows and columns are
committed to in a data availability header. The package is pure Python and
has no runtime dependencies.

## Modules

- `dasquare.namespace`
  - `Namespace` is a frozen dataclass holding a `version` and a 32-byte `id`.
  - It has `to_bytes()` and `validate_blob_namespace()`.
  - It has the checks `is_reserved()`, `is_parity_shares()`,
    `is_tail_padding()`, `is_reserved_padding()`, `is_tx()` and
    `is_pay_for_blob()`.
  - The constructors are `new_namespace(version, id)`, `new_v0(id)` (which
    takes a 10-byte user ID) and `from_bytes(data)` (which takes 33 bytes).
  - Invalid input raises `NamespaceError`, a subclass of `ValueError`.
  - The reserved namespaces are module constants such as `TX_NAMESPACE`,
    `PAY_FOR_BLOB_NAMESPACE`, `TAIL_PADDING_NAMESPACE` and
    `PARITY_SHARES_NAMESPACE`.
  - `random_blob_namespace_id()`, `random_blob_namespace()` and
    `random_blob_namespaces(count)` produce random namespaces that are valid
    for blobs.
- `dasquare.info_byte`
  - `InfoByte` is an `int` subclass that holds a share version and a
    sequence-start flag. Read them with `version()` and
    `is_sequence_start()`.
  - `new_info_byte(version, is_sequence_start)` builds one. It raises
    `ValueError` when the version is above 127.
  - `parse_info_byte(value)` decodes a raw byte.
- `dasquare.layout`
  - These functions apply the non-interactive default rules for placing
    blobs in a square.
  - `fits_in_square(cursor, square_size, *blob_lens)` returns
    `(fits, shares_used)`.
  - `blob_shares_used_non_interactive_defaults(cursor, square_size, *blob_lens)`
    returns `(shares_used, start_indexes)`.
  - `next_multiple_of_blob_min_square_size(cursor, blob_len, square_size)`
    returns `(index, fits_in_row)`.
  - The helpers are `round_up_by` and `min_square_size`.
- `dasquare.merkle`
  - A binary Merkle tree in the RFC 6962 style. Leaves are hashed with a
    0x00 prefix and inner nodes with a 0x01 prefix.
  - The functions are `hash_from_byte_slices(items)`, `leaf_hash`,
    `inner_hash` and `empty_hash`.
- `dasquare.da`
  - `DataAvailabilityHeader` holds `row_roots` and `column_roots`.
  - `hash()` is memoised and returns the Merkle root of the row roots
    followed by the column roots.
  - It also has `equals(other)`, `validate_basic()`, `is_zero()` and
    `to_dict()`. `str()` gives the upper-case hex of the hash.
  - `from_dict(data)` builds a header and validates it.
  - Malformed headers raise `DataAvailabilityHeaderError`.
- `dasquare.nmt_caching`
  - `WalkInstruction` has the members `LEFT` and `RIGHT`.
  - `SubTreeRootCacher.visit(hash, *children)` records the inner nodes of a
    tree. `walk(root, path)` follows a path down from a root, and raises
    `LookupError` when a node is not cached.
  - `EDSSubTreeRootCacher(square_size)` keeps one cacher per row.
    `row_visitor(row_index)` returns the visitor to hand to a row's tree.
    `get_sub_tree_root(dah, row, path)` walks from that row's root in a
    header.
- `dasquare.paths`
  - `Coord` is a node given by depth and position. It has `climb()` and
    `can_climb_right(min_depth)`.
  - `CommitmentPath` holds `instructions` and a `row`.
  - The functions are `calculate_commitment_paths(square_size, start,
    blob_share_len)`, `calculate_sub_tree_root_coordinates(max_depth,
    min_depth, start, end)` and `gen_sub_tree_root_path(depth, pos)`.
- `dasquare.commitment`
  - `get_commitment(cacher, dah, start, blob_share_len)` returns the Merkle
    root of the cached subtree roots that cover a blob.
- `dasquare.proof`
  - `parse_namespace(raw_shares, start_share, end_share)` checks a share
    range and returns the single namespace that the range covers. It raises
    `ValueError` on a bad range or on mixed namespaces.

## Example

```python
from dasquare.namespace import new_v0
from dasquare.layout import blob_shares_used_non_interactive_defaults
from dasquare.paths import calculate_commitment_paths

ns = new_v0(bytes([1] * 10))
assert not ns.is_reserved()

used, indexes = blob_shares_used_non_interactive_defaults(3, 8, 5, 7)
# used == 16, indexes == [4, 12]

for path in calculate_commitment_paths(8, 3, 16):
    print(path.row, path.instructions)
```

## What it does not do

The package does not split block data into shares. It does not erasure-code
a square into its extended form, and it does not build namespaced Merkle
trees. The row and column roots for a `DataAvailabilityHeader` must therefore
come from elsewhere. The same applies to the inner-node visits that feed an
`EDSSubTreeRootCacher`.

The package does not construct or verify inclusion proofs. `parse_namespace`
only checks a share range.

## Install and test

```
pip install ".[test]"
pytest
```