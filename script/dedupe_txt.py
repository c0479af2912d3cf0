"""
Clean up a word list file before using it with scrabbler.

Features:
- Preserves original order by default (stable dedupe).
- Optional case-insensitive mode (treat 'CART' == 'cart').
- Optional --upper / --lower to rewrite every word in one case.
- Optional stripping of blank/whitespace-only lines.
- Optional --alpha-only to drop lines with anything but letters.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in packages/datasets/data/words.txt \
        --case-insensitive --strip-blanks --alpha-only
"""

import argparse
from pathlib import Path

from packages.datasets.io import read_lines, write_lines


def unique_preserve_order(lines: list[str], key=None) -> list[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def clean_words(lines: list[str], *, strip_blanks=False, alpha_only=False, case=None,
                case_insensitive=False, sort=False) -> list[str]:
    """
    Apply the cleanup steps in a fixed order: strip/drop, re-case, dedupe, sort.
    """
    if strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]
    if alpha_only:
        lines = [s for s in lines if s.strip().isalpha()]
    if case == "upper":
        lines = [s.upper() for s in lines]
    elif case == "lower":
        lines = [s.lower() for s in lines]

    key = (lambda s: s.lower()) if case_insensitive else None
    out = unique_preserve_order(lines, key=key)
    if sort:
        out = sorted(out, key=(str.lower if case_insensitive else None))
    return out


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate lines from a word list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--case-insensitive", action="store_true", help="treat 'CART' and 'cart' as the same")
    case = ap.add_mutually_exclusive_group()
    case.add_argument("--upper", dest="case", action="store_const", const="upper",
                      help="rewrite every word in uppercase")
    case.add_argument("--lower", dest="case", action="store_const", const="lower",
                      help="rewrite every word in lowercase")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--alpha-only", action="store_true", help="drop lines that are not letters only")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines, strip_blanks=args.strip_blanks, alpha_only=args.alpha_only,
                      case=args.case, case_insensitive=args.case_insensitive, sort=args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
