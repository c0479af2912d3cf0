"""
Download a word list and write a clean one-word-per-line file.

What it does:
- Downloads the URL (plain text dictionary or an HTML page listing words).
- HTML pages are reduced to their visible text first.
- Keeps alphabetic tokens within --min-len..--max-len.
- De-duplicates case-insensitively while preserving source order.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out packages/datasets/data/words.txt
    # uppercase + alphabetically sorted:
    python -m script.fetch_wordlist --url ... --upper --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets.io import write_lines
from script.dedupe_txt import unique_preserve_order

TOKEN_RE = re.compile(r"[A-Za-z]+")


def page_text(resp: requests.Response) -> str:
    ctype = resp.headers.get("Content-Type", "")
    if "html" in ctype.lower():
        soup = BeautifulSoup(resp.text, "html.parser")
        return soup.get_text("\n", strip=True)
    return resp.text


def extract_words(text: str, min_len: int = 2, max_len: int = 15) -> list[str]:
    words = [m.group(0) for m in TOKEN_RE.finditer(text)]
    words = [w for w in words if min_len <= len(w) <= max_len]
    return unique_preserve_order(words, key=str.lower)


def fetch_words(url: str, min_len: int = 2, max_len: int = 15) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(page_text(r), min_len, max_len)


def main():
    ap = argparse.ArgumentParser(description="Download a word list for scrabbler")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/words.txt")
    ap.add_argument("--min-len", type=int, default=2)
    ap.add_argument("--max-len", type=int, default=15)
    ap.add_argument("--upper", action="store_true", help="write words in uppercase")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_len, args.max_len)
    words = [w.upper() if args.upper else w.lower() for w in words]
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
