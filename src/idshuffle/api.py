"""High level id encoding API."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from .codec.blocklist import is_blocked as _is_blocked
from .codec.engine import decode_id, encode_numbers
from .config import CodecConfig, build_config
from .defaults import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH


class IdShuffle:
    """Reversible encoder from integer sequences to short, shuffled ids.

    Instances hold only a frozen :class:`CodecConfig`, so one instance can be
    shared freely, including between threads.

    Example::

        >>> codec = IdShuffle(min_length=8)
        >>> codec.decode(codec.encode([1, 2, 3]))
        [1, 2, 3]
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Optional[Iterable[str]] = None,
    ) -> None:
        self._config = build_config(alphabet=alphabet, min_length=min_length, blocklist=blocklist)

    @classmethod
    def from_config(cls, cfg: CodecConfig) -> "IdShuffle":
        """Wrap an already validated configuration without re-deriving it."""

        instance = cls.__new__(cls)
        instance._config = cfg
        return instance

    @property
    def config(self) -> CodecConfig:
        return self._config

    def encode(self, numbers: Sequence[int]) -> str:
        """Encode *numbers* into an id; ``[]`` encodes to ``""``."""

        return encode_numbers(self._config, numbers)

    def decode(self, id_: str) -> List[int]:
        """Decode *id_*; malformed or foreign ids yield ``[]`` or a partial list."""

        return decode_id(self._config, id_)

    def is_blocked(self, candidate: str) -> bool:
        return _is_blocked(candidate, self._config.blocklist)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alphabet_size={len(self._config.alphabet)}, "
            f"min_length={self._config.min_length}, blocklist_size={len(self._config.blocklist)})"
        )


def encode(numbers: Sequence[int], **options: Any) -> str:
    """Encode *numbers* with a codec built from *options*."""

    return IdShuffle(**options).encode(numbers)


def decode(id_: str, **options: Any) -> List[int]:
    """Decode *id_* with a codec built from *options*."""

    return IdShuffle(**options).decode(id_)


__all__ = ["IdShuffle", "decode", "encode"]
