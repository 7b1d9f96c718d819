"""bijrank command-line interface.

Usage:
    python3 -m bijrank decode abk
    python3 -m bijrank encode 739
    python3 -m bijrank shift aaa 10
    python3 -m bijrank between aaaaaa: aaaaab:
    python3 -m bijrank sort b: a:m a:
    python3 -m bijrank version
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import (
    RankError,
    __version__,
    between,
    decode,
    encode,
    rank_key,
    shift,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bijrank",
        description="bijrank — sortable rank strings in bijective base-26",
    )
    sub = parser.add_subparsers(dest="command")

    # ── codec ──
    dec_p = sub.add_parser("decode", help="Numeral to integer")
    dec_p.add_argument("text")

    enc_p = sub.add_parser("encode", help="Integer to numeral")
    enc_p.add_argument("value", type=int)

    shift_p = sub.add_parser("shift", help="Move a numeral by DELTA")
    shift_p.add_argument("rank")
    shift_p.add_argument("delta", type=int, help="may be negative, e.g. -5")

    # ── ranks ──
    btw_p = sub.add_parser("between", help="Rank strictly between A and B")
    btw_p.add_argument("rank_a", metavar="A")
    btw_p.add_argument("rank_b", metavar="B")

    sort_p = sub.add_parser("sort", help="Print ranks in rank order")
    sort_p.add_argument("ranks", nargs="+", metavar="RANK")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _cmd_sort(args: argparse.Namespace) -> None:
    for rank in sorted(args.ranks, key=rank_key):
        print(rank)


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"bijrank {__version__}")
        return

    try:
        if args.command == "decode":
            print(decode(args.text))
        elif args.command == "encode":
            print(encode(args.value))
        elif args.command == "shift":
            print(shift(args.rank, args.delta))
        elif args.command == "between":
            print(between(args.rank_a, args.rank_b))
        elif args.command == "sort":
            _cmd_sort(args)
    except RankError as e:
        print(f"bijrank: error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
