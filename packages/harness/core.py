"""
Query harness primitives.

- run_query: match one rack of tiles (+ constraints) against a word list.
- run_batch: run many racks in sequence (optionally a sample prefix).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Mapping, Optional

from packages.engine import DEFAULT_POLICY, filter_words, parse_constraints
from packages.engine.constraints import format_constraints

logger = logging.getLogger(__name__)


def run_query(
        words: List[str],
        tiles: str,
        constraints: Optional[str] = None,
        *,
        max_length: Optional[int] = None,
        policy: str = DEFAULT_POLICY,
) -> Dict:
    """
    Parse constraints, filter the word list and time the whole thing.

    Returns:
        dict with keys:
            tiles (str), constraints (str, canonical "A,1" form),
            matches (list[str]), count (int), time_ms (float)

    Raises:
        InvalidConstraintFormat before any matching is attempted.
    """
    t0 = time.perf_counter_ns()
    cons = parse_constraints(constraints)
    matches = filter_words(words, tiles, cons, max_length=max_length, policy=policy)
    t1 = time.perf_counter_ns()

    return {
        "tiles": tiles,
        "constraints": format_constraints(cons),
        "matches": matches,
        "count": len(matches),
        "time_ms": (t1 - t0) / 1_000_000.0,
    }


def parse_max_length(value) -> Optional[int]:
    """CSV cell -> int, blank -> None (no override)."""
    if value is None or value == "":
        return None
    return int(value)


def run_batch(
        words: List[str],
        queries: Iterable[Mapping],
        *,
        policy: str = DEFAULT_POLICY,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many queries back-to-back. Each query is a mapping with `tiles` and
    optional `constraints` / `max_length`. If `sample` is provided, only the
    first K queries are used.

    A malformed constraint spec fails the whole batch (it is an input error,
    not a per-rack outcome).
    """
    pool = list(queries)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, q in enumerate(pool, start=1):
        r = run_query(
            words, q.get("tiles") or "", q.get("constraints") or None,
            max_length=parse_max_length(q.get("max_length")), policy=policy,
        )
        logger.debug("query %d/%d tiles=%r -> %d match(es)", idx, len(pool), r["tiles"], r["count"])
        out.append(r)
    return out
