"""
Word-list validator for scrabbler.

What this module does:
- Validate a word list file (one word per line).
- Flag invalid lines (blank, or containing anything but letters).
- Detect duplicates (case-insensitive, since matching is case-insensitive).
- Compute the SHA-256 of the raw file and the word-length range.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (case-insensitive)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    min_length: int      # shortest valid word (0 if none)
    max_length: int      # longest valid word (0 if none)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - letters only (any case)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema).
        `passed` is strict: the file exists, is non-empty and has no invalid lines.
        Duplicates are reported in `issues` but do not fail the list.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, 0, 0, 0, "", 0, 0, False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = {w.upper() for w in words}
    lengths = [len(w) for w in words]

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        min_length=min(lengths, default=0),
        max_length=max(lengths, default=0),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=412 (uniq=412, len=2..8, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"len={report['min_length']}..{report['max_length']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
