"""bijrank codec — bijective base-26 numerals <-> positive integers.

Bijective numeration has no zero digit, so every position ranges over all
26 symbols:

    a  -> 1      z  -> 26
    aa -> 27     az -> 52     ba -> 53
    zz -> 702    aaa -> 703

Strings of a given length therefore cover a contiguous integer range with
no gaps, and equal-length strings compare lexicographically the same way
their values compare.
"""

from __future__ import annotations

from typing import List

from ._constants import BASE, DIGIT_VALUE, VALUE_DIGIT
from ._errors import (
    ERR_EMPTY_INPUT,
    ERR_INVALID_SYMBOL,
    ERR_OUT_OF_RANGE,
    RankError,
)


def decode(text: str) -> int:
    """Return the integer value (>= 1) of a bijective base-26 string.

    Case-insensitive.  Raises RankError(ERR_EMPTY_INPUT) for "" and
    RankError(ERR_INVALID_SYMBOL) for anything outside a-z / A-Z.
    """
    if not isinstance(text, str):
        raise RankError(ERR_INVALID_SYMBOL,
                        "numeral must be str, got {}".format(type(text).__name__))
    if not text:
        raise RankError(ERR_EMPTY_INPUT, "empty numeral")

    value = 0
    for ch in text:
        digit = DIGIT_VALUE.get(ch)
        if digit is None:
            raise RankError(ERR_INVALID_SYMBOL,
                            "invalid symbol {!r} in {!r}".format(ch, text))
        value = value * BASE + digit
    return value


def encode(value: int) -> str:
    """Return the canonical lowercase bijective base-26 string for value >= 1."""
    # bool before int: True would otherwise encode as "a"
    if isinstance(value, bool) or not isinstance(value, int):
        raise RankError(ERR_OUT_OF_RANGE,
                        "value must be int, got {}".format(type(value).__name__))
    if value < 1:
        raise RankError(ERR_OUT_OF_RANGE,
                        "value {} has no bijective representation".format(value))

    # Least-significant digit first, then reverse.  A remainder of 0 is
    # the digit 26 ('z'), never a zero digit.
    out: List[str] = []
    n = value
    while n > 0:
        out.append(VALUE_DIGIT[n % BASE or BASE])
        n = (n - 1) // BASE
    out.reverse()
    return "".join(out)


def shift(rank: str, delta: int) -> str:
    """Move a numeral rank by `delta` (may be negative).

    >>> shift("aaa", 10)
    'aak'
    >>> shift("aaz", 10)
    'abj'
    """
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise RankError(ERR_OUT_OF_RANGE,
                        "delta must be int, got {}".format(type(delta).__name__))
    target = decode(rank) + delta
    if target < 1:
        raise RankError(ERR_OUT_OF_RANGE,
                        "shift {!r} by {} gives {}".format(rank, delta, target))
    return encode(target)
