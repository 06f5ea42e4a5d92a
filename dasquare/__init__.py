"""Namespaces, info bytes, share layout rules, Merkle hashing, data availability headers and blob commitment paths."""

__version__ = "0.1.0"

__all__ = [
    "commitment",
    "da",
    "info_byte",
    "layout",
    "merkle",
    "namespace",
    "nmt_caching",
    "paths",
    "proof",
]