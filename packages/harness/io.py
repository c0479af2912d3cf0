"""
I/O utilities for batch runs.

Responsibilities:
- read_queries:   load racks to run from a CSV (tiles, constraints, max_length).
- write_csv:      flatten per-query results into a tidy CSV (one row per rack).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Constraint specs start with a letter and contain commas, so they are always
  quoted by the csv module; no spreadsheet escaping is needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

QUERY_FIELDS = ["tiles", "constraints", "max_length"]
RESULT_FIELDS = ["tiles", "constraints", "count", "time_ms", "matches"]


def read_queries(path: str) -> List[Dict]:
    """
    Read a CSV of racks. A header row is required; `tiles` is mandatory,
    `constraints` and `max_length` are optional columns.

    Raises:
      FileNotFoundError if the path doesn't exist.
      ValueError if the header has no `tiles` column.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames or "tiles" not in reader.fieldnames:
            raise ValueError(f"{path}: header must include a 'tiles' column (got {reader.fieldnames})")
        return [
            {k: (row.get(k) or "").strip() for k in QUERY_FIELDS}
            for row in reader
        ]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of query results to CSV.

    Schema (columns):
      tiles, constraints, count, time_ms, matches

    `matches` holds the matching words joined by single spaces, in word-list order.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "tiles": r["tiles"],
                "constraints": r.get("constraints", ""),
                "count": r["count"],
                "time_ms": round(float(r["time_ms"]), 3),
                "matches": " ".join(r["matches"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (queries, source file, policy, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_queries, total_matches
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
