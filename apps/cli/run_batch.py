# apps/cli/run_batch.py
"""
Run many racks against one word list in one shot.

Reads a CSV of queries (header: tiles,constraints,max_length), matches each
rack with a live progress bar, and writes to <outdir>:
  - batch_<timestamp>.csv           : one row per rack
  - batch_<timestamp>_manifest.json : config, word-list report, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from packages.datasets import pretty_summary, resolve_source, validate_wordlist
from packages.engine import DEFAULT_POLICY, get_policy_ids
from packages.harness import read_queries, run_query, write_csv, write_manifest
from packages.harness.core import parse_max_length
from packages.harness.io import git_commit_or_unknown, timestamp_id

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(prog="scrabbler-batch",
                                 description="scrabbler - match many tile racks at once")
    ap.add_argument("--queries", required=True,
                    help="CSV with a 'tiles' column and optional 'constraints', 'max_length'")
    ap.add_argument("--source-file", "-S",
                    help="word list (one per line); defaults to the built-in list")
    ap.add_argument("--length-policy", choices=get_policy_ids(), default=DEFAULT_POLICY,
                    help=f"word length rule (default: {DEFAULT_POLICY})")
    ap.add_argument("--sample", type=int, help="run only the first K racks")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar on stderr")
    ap.add_argument("--verbose", "-v", action="store_true", help="log INFO messages to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and load the word list
    source = resolve_source(args.source_file)
    rep = validate_wordlist(str(source.path))
    print(pretty_summary(rep))
    try:
        words = source.load()
        queries = read_queries(args.queries)
    except (FileNotFoundError, ValueError) as e:
        print(f"scrabbler-batch: error: {e}", file=sys.stderr)
        return 2

    if args.sample is not None:
        queries = queries[: args.sample]

    # 2) Run with progress
    results = []
    for q in tqdm(queries, ncols=80, desc="Matching", unit="rack",
                  disable=(args.progress == "off")):
        try:
            r = run_query(words, q["tiles"], q["constraints"] or None,
                          max_length=parse_max_length(q["max_length"]),
                          policy=args.length_policy)
        except ValueError as e:  # InvalidConstraintFormat or a bad max_length cell
            print(f"scrabbler-batch: error: rack {q['tiles']!r}: {e}", file=sys.stderr)
            return 2
        results.append(r)

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"batch_{run_id}.csv"
    manifest_path = outdir / f"batch_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "word_source": source.describe(),
        "wordlist": rep,
        "num_queries": len(results),
        "total_matches": sum(r["count"] for r in results),
    }
    write_manifest(manifest, str(manifest_path))
    logger.info("batch %s: %d rack(s), %d match(es)", run_id, len(results), manifest["total_matches"])

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
