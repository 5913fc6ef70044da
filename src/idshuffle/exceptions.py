"""Custom exception hierarchy for the idshuffle codec."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List


class IdShuffleError(Exception):
    """Base class for all idshuffle errors."""


class ConfigurationError(IdShuffleError):
    """Raised when the alphabet, minimum length or blocklist is invalid."""


class EncodingError(IdShuffleError):
    """Raised when the numbers handed to ``encode`` cannot be encoded."""


@dataclass
class NumberOutOfRangeError(EncodingError):
    index: int
    value: int

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"number at index {self.index} is out of range: {self.value} (must be >= 0)"


@dataclass
class RetryExhaustedError(IdShuffleError):
    """Raised when every alphabet rotation produced a blocked id."""

    numbers: List[int]
    attempts: int

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        return f"reached max attempts ({self.attempts}) to re-generate the id"


__all__ = [
    "ConfigurationError",
    "EncodingError",
    "IdShuffleError",
    "NumberOutOfRangeError",
    "RetryExhaustedError",
]
