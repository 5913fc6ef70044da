"""Positional numeral conversion over an arbitrary symbol alphabet."""

from __future__ import annotations

from typing import List


def to_symbols(value: int, base_alphabet: str) -> str:
    """Render *value* in base ``len(base_alphabet)``, most significant digit first.

    Args:
        value: A non-negative integer.
        base_alphabet: Digit symbols; index ``k`` stands for digit ``k``.

    Returns:
        A non-empty string. ``0`` renders as ``base_alphabet[0]``.
    """

    base = len(base_alphabet)
    digits: List[str] = []
    while True:
        value, digit = divmod(value, base)
        digits.append(base_alphabet[digit])
        if value == 0:
            break
    return "".join(reversed(digits))


def to_value(symbols: str, base_alphabet: str) -> int:
    """Inverse of :func:`to_symbols`."""

    base = len(base_alphabet)
    value = 0
    for symbol in symbols:
        value = value * base + base_alphabet.index(symbol)
    return value


__all__ = ["to_symbols", "to_value"]
