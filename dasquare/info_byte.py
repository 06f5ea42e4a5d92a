"""The info byte: a 7-bit share version and a sequence start flag."""

from __future__ import annotations

MAX_SHARE_VERSION = 127


class InfoByte(int):
    """A byte whose upper seven bits hold the share version and whose lowest
    bit is 1 for the first share of a sequence."""

    def __new__(cls, value: int = 0) -> "InfoByte":
        if not 0 <= value <= 0xFF:
            raise ValueError(f"info byte {value} out of range 0..255")
        return super().__new__(cls, value)

    def version(self) -> int:
        """Return the share version encoded in this byte."""
        return int(self) >> 1

    def is_sequence_start(self) -> bool:
        """Return whether this share starts a sequence."""
        return int(self) % 2 == 1


def new_info_byte(version: int, is_sequence_start: bool) -> InfoByte:
    """Build an info byte, raising ValueError if the version is too large."""
    if not 0 <= version <= MAX_SHARE_VERSION:
        raise ValueError(
            f"version {version} must be less than or equal to {MAX_SHARE_VERSION}"
        )
    return InfoByte((version << 1) + (1 if is_sequence_start else 0))


def parse_info_byte(value: int) -> InfoByte:
    """Decode a raw byte into an InfoByte."""
    return new_info_byte(value >> 1, value % 2 == 1)