"""bijrank error codes, exception class, and precedence logic.

Every failure in this package is local input validation, detected before
any computation proceeds.  None are retryable: they indicate caller
misuse, so callers distinguish them by code rather than by message.
"""

from __future__ import annotations

from typing import List

# ── Error codes (ordered by precedence) ──────────────────────
# Values equal their names so they are grep-friendly in logs and vectors.

ERR_EMPTY_INPUT: str = "ERR_EMPTY_INPUT"        # zero-length numeral string
ERR_INVALID_SYMBOL: str = "ERR_INVALID_SYMBOL"  # char outside the alphabet
ERR_OUT_OF_RANGE: str = "ERR_OUT_OF_RANGE"      # value < 1 (no zero digit)
ERR_EQUAL_RANKS: str = "ERR_EQUAL_RANKS"        # nothing strictly between

# Precedence: index 0 wins.  A malformed rank is reported before the
# relationship between two ranks is considered.
PRECEDENCE: List[str] = [
    ERR_EMPTY_INPUT,
    ERR_INVALID_SYMBOL,
    ERR_OUT_OF_RANGE,
    ERR_EQUAL_RANKS,
]

_PREC_INDEX = {code: idx for idx, code in enumerate(PRECEDENCE)}


class RankError(ValueError):
    """Exception for rank codec and midpoint errors.

    The `.code` attribute is one of the ERR_* strings above and is what
    the conformance vectors compare against.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code


def choose_reported_error(errors: List[str]) -> str:
    """Given several detected violations, return the highest-precedence code.

    Single calls raise on the first problem they see.  This helper is for
    callers that validate a batch of ranks and want one code to report.
    """
    return min(errors, key=lambda e: _PREC_INDEX.get(e, 10_000))
