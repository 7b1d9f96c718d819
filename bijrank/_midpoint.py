"""bijrank midpoint — two-part rank ordering and the between() algorithm.

A two-part rank is ``major:minor``.  The major segment is a bijective
numeral compared by value; it is what most insertions split.  The minor
segment only comes into play once two majors are adjacent, and is
compared as a base-26 fraction with 'a' as its zero digit, so there is
always room for another minor between two distinct ones.

Because 'a' is the fraction's zero digit, a trailing 'a' carries no
ordering weight: ``m:b`` and ``m:ba`` are the same position.  between()
therefore never emits a minor that ends in 'a'.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ._codec import decode, encode
from ._constants import (
    ALPHABET,
    BASE,
    DELIMITER,
    DIGIT_VALUE,
    FILLER,
    MINOR_HIGH_DEFAULT,
    MINOR_LOW_DEFAULT,
    VALUE_DIGIT,
)
from ._errors import ERR_EMPTY_INPUT, ERR_EQUAL_RANKS, ERR_INVALID_SYMBOL, RankError

_ZERO = ALPHABET[0]

RankKey = Tuple[int, str]


# ── Parsing and ordering ─────────────────────────────────────

def _split(rank: str) -> Tuple[int, str, str]:
    """Validate a rank and return (major value, major, minor), lowercased."""
    if not isinstance(rank, str):
        raise RankError(ERR_INVALID_SYMBOL,
                        "rank must be str, got {}".format(type(rank).__name__))
    major, _, minor = rank.partition(DELIMITER)
    if not major:
        raise RankError(ERR_EMPTY_INPUT, "empty major segment in {!r}".format(rank))
    if DELIMITER in minor:
        raise RankError(ERR_INVALID_SYMBOL,
                        "more than one {!r} in {!r}".format(DELIMITER, rank))
    value = decode(major)
    if minor:
        decode(minor)  # validation only
    return value, major.lower(), minor.lower()


def _key(major_value: int, minor: str) -> RankKey:
    return major_value, minor.rstrip(_ZERO)


def parse_rank(rank: str) -> Tuple[str, str]:
    """Split a rank into its lowercased (major, minor) segments.

    The minor is "" when the rank has no delimiter or nothing after it.
    """
    _, major, minor = _split(rank)
    return major, minor


def rank_key(rank: str) -> RankKey:
    """Sort key for two-part ranks: ``sorted(ranks, key=rank_key)``."""
    value, _, minor = _split(rank)
    return _key(value, minor)


def compare_ranks(rank_a: str, rank_b: str) -> int:
    """Return -1, 0 or 1 as rank_a sorts before, with, or after rank_b."""
    ka = rank_key(rank_a)
    kb = rank_key(rank_b)
    return (ka > kb) - (ka < kb)


# ── Midpoint ─────────────────────────────────────────────────

def _minor_candidates(low_minor: str, high_minor: str) -> Iterator[str]:
    """Yield minor segments to try, cheapest first."""
    minor_low = decode(low_minor or MINOR_LOW_DEFAULT)
    minor_high = decode(high_minor or MINOR_HIGH_DEFAULT)

    if minor_high - minor_low >= 2:
        mid = encode((minor_low + minor_high) // 2)
        if mid.endswith(_ZERO):
            mid += FILLER
        yield mid

    # Lexical extension: always sorts after low_minor.
    yield low_minor + FILLER


def _fraction_between(low: str, high: Optional[str]) -> str:
    """Digit-wise midpoint of two minors read as base-26 fractions.

    `high` of None means unbounded above.  Requires low < high after
    trailing zero digits are stripped.  The last emitted digit is always
    above 'a'.
    """
    low = low.rstrip(_ZERO)
    if high is not None:
        high = high.rstrip(_ZERO)

    out: List[str] = []
    i = 0
    while True:
        lo = DIGIT_VALUE[low[i]] - 1 if i < len(low) else 0
        if high is None:
            hi = BASE
        else:
            hi = DIGIT_VALUE[high[i]] - 1 if i < len(high) else 0
        if lo + 1 < hi:
            out.append(VALUE_DIGIT[(lo + hi) // 2 + 1])
            return "".join(out)
        out.append(VALUE_DIGIT[lo + 1])
        if lo < hi:
            # Prefix is now strictly below high; everything after is free.
            high = None
        i += 1


def between(rank_a: str, rank_b: str) -> str:
    """Return a rank that sorts strictly between rank_a and rank_b.

    Argument order does not matter.  Whenever the majors are at least two
    apart the result is a fresh major with an empty minor; otherwise the
    lower major is kept and a minor is chosen inside the gap.

    >>> between("aaaaaa:", "aaaaac:")
    'aaaaab:'
    >>> between("aaaaaa:", "aaaaab:")
    'aaaaaa:m'
    >>> between("aaaaaa:a", "aaaaab:b")
    'aaaaaa:ai'
    """
    a = _split(rank_a)
    b = _split(rank_b)
    key_a = _key(a[0], a[2])
    key_b = _key(b[0], b[2])
    if key_a == key_b:
        raise RankError(ERR_EQUAL_RANKS,
                        "no rank between {!r} and {!r}".format(rank_a, rank_b))

    if key_a < key_b:
        (major_low, low_major, low_minor), low_key = a, key_a
        (major_high, _, high_minor), high_key = b, key_b
    else:
        (major_low, low_major, low_minor), low_key = b, key_b
        (major_high, _, high_minor), high_key = a, key_a

    if major_high - major_low >= 2:
        return encode((major_low + major_high) // 2) + DELIMITER

    # Integer midpoints of minors with different lengths can land outside
    # the gap, so every candidate is checked against the real ordering.
    for minor in _minor_candidates(low_minor, high_minor):
        if low_key < _key(major_low, minor) < high_key:
            return low_major + DELIMITER + minor

    upper = high_minor if major_high == major_low else None
    return low_major + DELIMITER + _fraction_between(low_minor, upper)
