"""bijrank — sortable rank strings in bijective base-26.

Assign ordered string identifiers to items in a list so a new item can
always be inserted between two existing ones without renumbering the
rest.

Quick start:
    >>> from bijrank import between, encode, decode
    >>> encode(703), decode("abk")
    ('aaa', 739)
    >>> between("aaaaaa:", "aaaaac:")
    'aaaaab:'
    >>> between("aaaaaa:", "aaaaab:")
    'aaaaaa:m'

Ranks are ``major:minor``.  Majors are compared by numeric value, minors
as base-26 fractions; use ``rank_key`` to sort them the same way.
"""

from __future__ import annotations

from ._codec import decode, encode, shift
from ._constants import ALPHABET, BASE, DELIMITER
from ._errors import (
    ERR_EMPTY_INPUT,
    ERR_EQUAL_RANKS,
    ERR_INVALID_SYMBOL,
    ERR_OUT_OF_RANGE,
    RankError,
    choose_reported_error,
)
from ._midpoint import between, compare_ranks, parse_rank, rank_key

__version__ = "1.0.0"

__all__ = [
    # Codec
    "decode",
    "encode",
    "shift",
    # Two-part ranks
    "between",
    "parse_rank",
    "rank_key",
    "compare_ranks",
    # Constants
    "ALPHABET",
    "BASE",
    "DELIMITER",
    # Exception
    "RankError",
    "choose_reported_error",
    # Error codes
    "ERR_EMPTY_INPUT",
    "ERR_INVALID_SYMBOL",
    "ERR_OUT_OF_RANGE",
    "ERR_EQUAL_RANKS",
]
