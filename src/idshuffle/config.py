"""Validated, immutable codec configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .codec.alphabet import shuffle
from .codec.blocklist import filter_blocklist
from .defaults import DEFAULT_ALPHABET, DEFAULT_BLOCKLIST, DEFAULT_MIN_LENGTH
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

MIN_ALPHABET_LENGTH = 3
MAX_MIN_LENGTH = 255


@dataclass(frozen=True)
class CodecConfig:
    """Configuration shared read-only by every encode and decode call.

    ``alphabet`` holds the working alphabet, i.e. the configured alphabet after
    one pass of :func:`~idshuffle.codec.alphabet.shuffle`. ``blocklist`` holds
    the lowercased words that survived filtering against that alphabet.
    """

    alphabet: str
    min_length: int
    blocklist: FrozenSet[str]


def _validate_alphabet(alphabet: object) -> str:
    if not isinstance(alphabet, str):
        raise ConfigurationError("alphabet must be a string")
    if len(alphabet.encode("utf-8")) != len(alphabet):
        raise ConfigurationError("alphabet cannot contain multibyte characters")
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise ConfigurationError(f"alphabet length must be at least {MIN_ALPHABET_LENGTH}")
    if len(set(alphabet)) != len(alphabet):
        raise ConfigurationError("alphabet must contain unique characters")
    return alphabet


def _validate_min_length(min_length: object) -> int:
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise ConfigurationError("minimum length must be an integer")
    if not 0 <= min_length <= MAX_MIN_LENGTH:
        raise ConfigurationError(f"minimum length has to be between 0 and {MAX_MIN_LENGTH}")
    return min_length


def _validate_blocklist(blocklist: Iterable[str]) -> list[str]:
    if isinstance(blocklist, str):
        raise ConfigurationError("blocklist must be a collection of words, not a single string")
    try:
        words = list(blocklist)
    except TypeError:
        raise ConfigurationError("blocklist must be an iterable of strings") from None
    if not all(isinstance(word, str) for word in words):
        raise ConfigurationError("blocklist must only contain strings")
    return words


def build_config(
    alphabet: str = DEFAULT_ALPHABET,
    min_length: int = DEFAULT_MIN_LENGTH,
    blocklist: Optional[Iterable[str]] = None,
) -> CodecConfig:
    """Validate user-supplied settings and derive the working configuration.

    Args:
        alphabet: Unique single-byte symbols, at least three of them.
        min_length: Minimum id length, between 0 and 255 inclusive.
        blocklist: Words generated ids must avoid. ``None`` selects the
            built-in list; pass an empty collection to disable blocking.

    Returns:
        A frozen :class:`CodecConfig`.

    Raises:
        ConfigurationError: If any setting violates its constraints.
    """

    alphabet = _validate_alphabet(alphabet)
    min_length = _validate_min_length(min_length)
    words = _validate_blocklist(DEFAULT_BLOCKLIST if blocklist is None else blocklist)

    filtered = filter_blocklist(words, alphabet)
    logger.debug("blocklist filtered from %d to %d words", len(words), len(filtered))

    return CodecConfig(alphabet=shuffle(alphabet), min_length=min_length, blocklist=filtered)


__all__ = ["CodecConfig", "MAX_MIN_LENGTH", "MIN_ALPHABET_LENGTH", "build_config"]
