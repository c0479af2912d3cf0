# apps/cli/find.py
"""
CLI entry point: list the words you can play with your tiles.

This script:
  1) Resolves the word source (--source-file, or the built-in list).
  2) Optionally validates the list and prints a one-line summary (--check).
  3) Parses the constraints and filters the list.
  4) Prints the matches (one per line) and a final count, or, with
     --explain WORD, the reasons WORD is not playable.

Examples:
  python -m apps.cli.find -T "c,a,r,t"
  python -m apps.cli.find -T cart -C "t,1"
  python -m apps.cli.find -T aabb -S my_words.txt --max-length 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from packages.datasets import pretty_summary, resolve_source, validate_wordlist
from packages.engine import (
    DEFAULT_POLICY,
    InvalidConstraintFormat,
    explain_word,
    filter_words,
    get_policy_ids,
    parse_constraints,
)

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="scrabbler",
        description="Generate the possible scrabble words for a rack of tiles and "
                    "optional positional constraints.",
    )
    ap.add_argument("--source-file", "-S",
                    help="file with the words to be searched (one per line); "
                         "defaults to the built-in list")
    ap.add_argument("--tiles", "-T", default="",
                    help='your tiles, e.g. "c,a,r,t" or "cart"')
    ap.add_argument("--constraints", "-C", default="",
                    help='letters you want at fixed 1-based positions, e.g. "a,1,t,3"')
    ap.add_argument("--max-length", "-L", type=int,
                    help="maximum word length (overrides tiles + constraints)")
    ap.add_argument("--length-policy", choices=get_policy_ids(), default=DEFAULT_POLICY,
                    help=f"word length rule (default: {DEFAULT_POLICY})")
    ap.add_argument("--explain", metavar="WORD",
                    help="explain whether WORD is playable instead of listing matches")
    ap.add_argument("--check", action="store_true",
                    help="validate the word list and print a summary first")
    ap.add_argument("--limit", type=int,
                    help="print at most this many words (the count still covers all)")
    ap.add_argument("--verbose", "-v", action="count", default=0,
                    help="log to stderr (-v info, -vv debug)")
    return ap


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")


def _fail(msg: str) -> int:
    print(f"scrabbler: error: {msg}", file=sys.stderr)
    return EXIT_USAGE


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, load the word list, run the matcher and print results.
    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if args.max_length is not None and args.max_length < 0:
        return _fail("--max-length must be >= 0")

    # 1) Constraints first: a bad spec means no matching is attempted at all
    try:
        constraints = parse_constraints(args.constraints)
    except InvalidConstraintFormat as e:
        return _fail(f"invalid constraints: {e}")

    source = resolve_source(args.source_file)

    # 2) Optional word-list health check
    if args.check:
        print(pretty_summary(validate_wordlist(str(source.path))))

    # 3) Single-word diagnosis mode
    if args.explain:
        reasons = explain_word(args.explain, args.tiles, constraints,
                               max_length=args.max_length, policy=args.length_policy)
        if not reasons:
            print(f"{args.explain}: playable")
        else:
            print(f"{args.explain}: not playable")
            for r in reasons:
                print(f"  - {r}")
        return 0

    try:
        words = source.load()
    except FileNotFoundError:
        return _fail(f"word list not found: {source.describe()}")

    # 4) Match and print (source order)
    matches = filter_words(words, args.tiles, constraints,
                           max_length=args.max_length, policy=args.length_policy)
    shown = matches if args.limit is None else matches[: max(0, args.limit)]
    for w in shown:
        print(w)
    print(f"Found {len(matches)} matching word(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
