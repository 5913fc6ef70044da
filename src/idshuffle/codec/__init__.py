"""Alphabet, numeral and blocklist primitives behind the id codec."""

from .alphabet import chunk_alphabet, rotate, shuffle
from .blocklist import filter_blocklist, is_blocked
from .numeral import to_symbols, to_value

__all__ = [
    "chunk_alphabet",
    "filter_blocklist",
    "is_blocked",
    "rotate",
    "shuffle",
    "to_symbols",
    "to_value",
]
