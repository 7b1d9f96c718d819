"""bijrank constants — alphabet, rank delimiter, filler symbol, lookup tables.

The alphabet is fixed at 26 lowercase letters.  Digit values are 1-based
because bijective numeration has no zero digit: 'a' is 1 and 'z' is 26.
"""

from __future__ import annotations

from typing import Dict

ALPHABET: str = "abcdefghijklmnopqrstuvwxyz"
BASE: int = len(ALPHABET)  # 26

# Separates the major and minor segments of a two-part rank.
# Must never be a member of ALPHABET.
DELIMITER: str = ":"

# Appended to a minor segment that would otherwise end in ALPHABET[0].
# Any symbol other than 'a' works; the value is part of the wire format,
# so it never changes.
FILLER: str = "i"

# Default minor bounds when a segment is absent (see between()).
MINOR_LOW_DEFAULT: str = ALPHABET[0]
MINOR_HIGH_DEFAULT: str = ALPHABET[-1]

# ── Lookup tables ────────────────────────────────────────────
# Both cases decode; only lowercase is ever emitted.  Digits '0'-'9'
# are deliberately absent.

DIGIT_VALUE: Dict[str, int] = {}
for _i, _ch in enumerate(ALPHABET, start=1):
    DIGIT_VALUE[_ch] = _i
    DIGIT_VALUE[_ch.upper()] = _i

VALUE_DIGIT: Dict[int, str] = {i: ch for i, ch in enumerate(ALPHABET, start=1)}

del _i, _ch
