"""Blocklist filtering and matching for generated ids."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Iterable

MIN_WORD_LENGTH = 3


def filter_blocklist(words: Iterable[str], alphabet: str) -> FrozenSet[str]:
    """Keep the lowercased *words* that could ever appear in an id.

    Words shorter than three characters, or using a character that the
    lowercased *alphabet* lacks, are dropped.
    """

    alphabet_chars = set(alphabet.lower())
    filtered = set()
    for word in words:
        if len(word) < MIN_WORD_LENGTH:
            continue
        lowered = word.lower()
        if all(char in alphabet_chars for char in lowered):
            filtered.add(lowered)
    return frozenset(filtered)


def _is_decimal(word: str) -> bool:
    # ASCII digits only
    return all("0" <= char <= "9" for char in word)


def is_blocked(candidate: str, blocklist: AbstractSet[str]) -> bool:
    """Return ``True`` when *candidate* matches any word in *blocklist*.

    Matching is case-insensitive. Short ids and short words must match
    exactly; numeric words only match at either end of the id; every other
    word matches anywhere inside it.
    """

    lowered = candidate.lower()
    for word in blocklist:
        if len(word) > len(lowered):
            continue
        if len(lowered) <= MIN_WORD_LENGTH or len(word) <= MIN_WORD_LENGTH:
            if lowered == word:
                return True
        elif _is_decimal(word):
            if lowered.startswith(word) or lowered.endswith(word):
                return True
        elif word in lowered:
            return True
    return False


__all__ = ["MIN_WORD_LENGTH", "filter_blocklist", "is_blocked"]
