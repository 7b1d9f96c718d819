"""bijrank conformance test suite.

Runs every vector from conformance/rank_vectors.json against
conformance/rank_expected.json.

Usage:
    python tests/test_conformance.py [--vectors-dir DIR]
    python -m pytest tests/test_conformance.py -v
    BIJRANK_VECTORS_DIR=conformance python tests/test_conformance.py
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import unittest
from typing import Any, Dict, List, Optional, Tuple

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bijrank import RankError, between, decode, encode, shift

# ── Locate conformance data ───────────────────────────────────

_VECTORS_DIR: Optional[str] = os.environ.get("BIJRANK_VECTORS_DIR", None)

_OPS = {
    "encode": encode,
    "decode": decode,
    "shift": shift,
    "between": between,
}


def _find_vectors_dir() -> str:
    if _VECTORS_DIR:
        return _VECTORS_DIR
    candidates = [
        os.path.join(os.path.dirname(__file__), "..", "conformance"),
        os.path.join(os.path.dirname(__file__), "conformance"),
    ]
    for d in candidates:
        if os.path.isfile(os.path.join(d, "rank_vectors.json")):
            return d
    raise FileNotFoundError(
        "Cannot find conformance vectors. Set BIJRANK_VECTORS_DIR or --vectors-dir."
    )


def _load_data() -> Tuple[List[dict], Dict[str, dict], str]:
    """Load vectors and expected values.  Returns (vectors, expected, version)."""
    d = _find_vectors_dir()
    with open(os.path.join(d, "rank_vectors.json"), "r", encoding="utf-8") as f:
        doc = json.load(f)
    with open(os.path.join(d, "rank_expected.json"), "r", encoding="utf-8") as f:
        expected = json.load(f)["expected"]
    return doc["vectors"], expected, doc["version"]


def _run_vector(vec: dict) -> Dict[str, Any]:
    """Execute one vector.  Returns {"result": ...} or {"err": ...}."""
    fn = _OPS.get(vec["op"])
    if fn is None:
        return {"err": "UNKNOWN_OP"}
    try:
        return {"result": fn(*vec["args"])}
    except RankError as e:
        return {"err": e.code}


# ── unittest integration ──────────────────────────────────────

class ConformanceTests(unittest.TestCase):
    """Dynamically generated: one test method per vector."""
    pass


def _make_test(vec: dict, exp: dict):
    def test_fn(self: unittest.TestCase) -> None:
        got = _run_vector(vec)
        self.assertEqual(got, exp,
                         "{}: got {} expected {}".format(vec["test_id"], got, exp))
    return test_fn


# Attach test methods at import time.
try:
    _vectors, _expected, _version = _load_data()
    for _vec in _vectors:
        _tid = _vec["test_id"].replace("-", "_")
        _fn = _make_test(_vec, _expected[_vec["test_id"]])
        _fn.__name__ = "test_{}".format(_tid)
        _fn.__qualname__ = "ConformanceTests.test_{}".format(_tid)
        setattr(ConformanceTests, "test_{}".format(_tid), _fn)
except FileNotFoundError:
    pass


# ── Standalone CLI runner ─────────────────────────────────────

def main() -> None:
    global _VECTORS_DIR

    parser = argparse.ArgumentParser(description="bijrank conformance runner")
    parser.add_argument("--vectors-dir", default=None,
                        help="Directory with rank_vectors.json / rank_expected.json")
    args, _remaining = parser.parse_known_args()

    if args.vectors_dir:
        _VECTORS_DIR = args.vectors_dir

    vectors, expected, version = _load_data()

    passed = 0
    failures: List[Tuple[str, dict, dict]] = []

    for vec in vectors:
        tid = vec["test_id"]
        got = _run_vector(vec)
        exp = expected[tid]
        if got == exp:
            passed += 1
        else:
            failures.append((tid, got, exp))

    total = passed + len(failures)
    print("CONFORMANCE (v{}): {}/{} PASS".format(version, passed, total))
    for tid, got, exp in failures:
        print("  FAIL {}: got={} expected={}".format(tid, got, exp))

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
