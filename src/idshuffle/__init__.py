"""Short, shuffled, reversible ids for sequences of non-negative integers."""

from .api import IdShuffle, decode, encode
from .config import CodecConfig, build_config
from .defaults import DEFAULT_ALPHABET, DEFAULT_BLOCKLIST, DEFAULT_MIN_LENGTH
from .exceptions import (
    ConfigurationError,
    EncodingError,
    IdShuffleError,
    NumberOutOfRangeError,
    RetryExhaustedError,
)

__version__ = "0.1.0"

__all__ = [
    "CodecConfig",
    "ConfigurationError",
    "DEFAULT_ALPHABET",
    "DEFAULT_BLOCKLIST",
    "DEFAULT_MIN_LENGTH",
    "EncodingError",
    "IdShuffle",
    "IdShuffleError",
    "NumberOutOfRangeError",
    "RetryExhaustedError",
    "build_config",
    "decode",
    "encode",
]
