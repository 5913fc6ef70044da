"""Encode and decode integer sequences against a :class:`CodecConfig`."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..config import CodecConfig
from ..exceptions import EncodingError, NumberOutOfRangeError, RetryExhaustedError
from .alphabet import chunk_alphabet, shuffle
from .blocklist import is_blocked
from .numeral import to_symbols, to_value

logger = logging.getLogger(__name__)


def _validate_numbers(numbers: Sequence[int]) -> List[int]:
    checked: List[int] = []
    for index, value in enumerate(numbers):
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodingError(f"number at index {index} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise NumberOutOfRangeError(index=index, value=value)
        checked.append(value)
    return checked


def _offset(alphabet: str, numbers: Sequence[int], retry: int) -> int:
    base = len(alphabet)
    offset = len(numbers)
    for i, value in enumerate(numbers):
        offset += ord(alphabet[value % base]) + i
    return (offset % base + retry) % base


def _pad(id_: str, alphabet: str, min_length: int) -> str:
    if len(id_) >= min_length:
        return id_
    parts = [id_, alphabet[0]]
    length = len(id_) + 1
    while min_length - length > 0:
        alphabet = shuffle(alphabet)
        filler = alphabet[: min(min_length - length, len(alphabet))]
        parts.append(filler)
        length += len(filler)
    return "".join(parts)


def _attempt(cfg: CodecConfig, numbers: Sequence[int], retry: int) -> str:
    offset = _offset(cfg.alphabet, numbers, retry)
    prefix = cfg.alphabet[offset]
    alphabet = chunk_alphabet(cfg.alphabet, offset)

    parts = [prefix]
    last = len(numbers) - 1
    for i, value in enumerate(numbers):
        parts.append(to_symbols(value, alphabet[1:]))
        if i < last:
            parts.append(alphabet[0])
            alphabet = shuffle(alphabet)

    return _pad("".join(parts), alphabet, cfg.min_length)


def encode_numbers(cfg: CodecConfig, numbers: Sequence[int]) -> str:
    """Encode *numbers* into an id.

    Every rotation of the working alphabet is tried in turn until the
    candidate id clears the blocklist.

    Raises:
        EncodingError: If a value is not an integer.
        NumberOutOfRangeError: If a value is negative.
        RetryExhaustedError: If every attempt produced a blocked id.
    """

    checked = _validate_numbers(numbers)
    if not checked:
        return ""

    attempts = len(cfg.alphabet) + 1
    for retry in range(attempts):
        candidate = _attempt(cfg, checked, retry)
        if not is_blocked(candidate, cfg.blocklist):
            return candidate
        logger.debug("id %r is blocked, retrying with increment %d", candidate, retry + 1)

    logger.warning("no unblocked id found for %d number(s) after %d attempts", len(checked), attempts)
    raise RetryExhaustedError(numbers=checked, attempts=attempts)


def decode_id(cfg: CodecConfig, id_: str) -> List[int]:
    """Decode *id_* back into the integers it was built from.

    Malformed input never raises: an id containing a symbol outside the
    alphabet yields ``[]``, and an empty chunk stops decoding with whatever
    was recovered before it.
    """

    if not isinstance(id_, str):
        raise TypeError("id must be a string")

    numbers: List[int] = []
    if not id_:
        return numbers

    if any(char not in cfg.alphabet for char in id_):
        return numbers

    alphabet = chunk_alphabet(cfg.alphabet, cfg.alphabet.index(id_[0]))
    remaining = id_[1:]

    while remaining:
        chunk, found, rest = remaining.partition(alphabet[0])
        if not chunk:
            return numbers
        numbers.append(to_value(chunk, alphabet[1:]))
        if found:
            alphabet = shuffle(alphabet)
            remaining = rest
        else:
            remaining = ""

    return numbers


__all__ = ["decode_id", "encode_numbers"]
