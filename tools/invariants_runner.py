#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Rank invariants (property checks) for bijrank.
#
# This runner:
# - round-trips random integers and numerals through the codec
# - checks encode() is strictly increasing in (length, text) order
# - inserts ranks at random positions of a growing list and checks every
#   new rank lands strictly between its neighbours
# - feeds random malformed pairs to between() and checks the reported code
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, json, random
from typing import Any, Dict, List, Optional

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

import bijrank
from bijrank import RankError, between, choose_reported_error, decode, encode, parse_rank, rank_key

SEED = int(os.environ.get("BIJRANK_SEED", "1337"))
TRIALS = int(os.environ.get("BIJRANK_TRIALS", "2000"))
MAX_NUMERAL_LEN = int(os.environ.get("BIJRANK_GEN_MAX_LEN", "8"))
LIST_INSERTS = int(os.environ.get("BIJRANK_LIST_INSERTS", "2000"))

random.seed(SEED)

def fail(label: str, ctx: Dict[str, Any]) -> None:
    print("FAIL:", label)
    print("CTX:", json.dumps(ctx, ensure_ascii=False)[:4000])
    raise SystemExit(1)

# --- generators ---

def rand_numeral(nmin: int = 1) -> str:
    n = random.randint(nmin, MAX_NUMERAL_LEN)
    return "".join(random.choice(bijrank.ALPHABET) for _ in range(n))

def rand_rank() -> str:
    minor = rand_numeral(0) if random.random() < 0.6 else ""
    return rand_numeral() + bijrank.DELIMITER + minor

def rand_bad_rank() -> Optional[str]:
    r = random.random()
    if r < 0.25:
        return ""
    if r < 0.50:
        return bijrank.DELIMITER + rand_numeral()
    if r < 0.75:
        return rand_numeral() + bijrank.DELIMITER + rand_numeral() + "7"
    return None  # valid; let the other side of the pair decide

def expected_code(rank: str) -> Optional[str]:
    try:
        parse_rank(rank)
    except RankError as e:
        return e.code
    return None

# --- checks ---

def check_codec() -> None:
    for _ in range(TRIALS):
        n = random.randint(1, 26 ** MAX_NUMERAL_LEN)
        s = encode(n)
        if decode(s) != n:
            fail("int round trip", {"n": n, "encoded": s})
        t = rand_numeral()
        if encode(decode(t.upper())) != t:
            fail("numeral round trip", {"s": t})
        m = random.randint(1, n)
        if m < n:
            u = encode(m)
            if not (len(u), u) < (len(s), s):
                fail("monotonicity", {"m": m, "n": n, "em": u, "en": s})

def check_between_pairs() -> None:
    for _ in range(TRIALS):
        a, b = rand_rank(), rand_rank()
        if rank_key(a) == rank_key(b):
            continue
        mid = between(a, b)
        low, high = sorted((a, b), key=rank_key)
        if not rank_key(low) < rank_key(mid) < rank_key(high):
            fail("between pair", {"a": a, "b": b, "mid": mid})
        if parse_rank(mid)[1].endswith(bijrank.ALPHABET[0]):
            fail("minor ends in zero digit", {"a": a, "b": b, "mid": mid})

def check_list_growth() -> None:
    ranks: List[str] = ["aaaaaa:", "zzzzzz:"]
    for i in range(LIST_INSERTS):
        # Bias towards the front so some gaps get hammered repeatedly.
        pos = min(int(random.expovariate(0.05)), len(ranks) - 2)
        mid = between(ranks[pos], ranks[pos + 1])
        if not rank_key(ranks[pos]) < rank_key(mid) < rank_key(ranks[pos + 1]):
            fail("list insert", {"round": i, "left": ranks[pos], "right": ranks[pos + 1], "mid": mid})
        ranks.insert(pos + 1, mid)

def check_errors() -> None:
    for _ in range(TRIALS):
        a = rand_bad_rank()
        b = rand_bad_rank()
        if a is None and b is None:
            continue
        a = a if a is not None else rand_rank()
        b = b if b is not None else rand_rank()
        codes = [c for c in (expected_code(a), expected_code(b)) if c]
        if not codes:
            continue
        try:
            got = between(a, b)
        except RankError as e:
            # Single calls stop at the first bad rank, which may not be the
            # highest-precedence one; the code must still be one of them.
            if e.code not in codes:
                fail("error code", {"a": a, "b": b, "got": e.code, "want": codes})
            continue
        fail("accepted malformed rank", {"a": a, "b": b, "got": got,
                                         "want": choose_reported_error(codes)})

def main() -> int:
    check_codec()
    check_between_pairs()
    check_list_growth()
    check_errors()
    print(f"OK: invariants trials={TRIALS} inserts={LIST_INSERTS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
