"""Alphabet permutation helpers shared by the encoder and decoder."""

from __future__ import annotations

from typing import Sequence


def shuffle(symbols: Sequence[str]) -> str:
    """Return a deterministic permutation of *symbols*.

    The permutation depends only on the content and order of *symbols*: two
    indices walk towards each other from both ends and each step swaps the
    left symbol with a position derived from both symbols' code points.
    """

    chars = list(symbols)
    size = len(chars)
    i, j = 0, size - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % size
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def rotate(symbols: str, offset: int) -> str:
    """Rotate *symbols* left by *offset* positions."""

    return symbols[offset:] + symbols[:offset]


def chunk_alphabet(symbols: str, offset: int) -> str:
    """Return the reversed left rotation used to encode the first chunk."""

    return rotate(symbols, offset)[::-1]


__all__ = ["chunk_alphabet", "rotate", "shuffle"]
