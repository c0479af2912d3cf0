"""
Single-word diagnosis.

This module answers the question: "Why can't I play this word?"
It runs the same three checks as the matcher on one word and collects a
reason for every check that fails instead of stopping at the first one.

An empty list of reasons means the word is playable.
"""

from __future__ import annotations

from typing import List, Optional

from .constraints import ConstraintsLike, ensure_constraints
from .length import DEFAULT_POLICY, create_policy
from .tiles import fold_word, frequency_map, normalize_tiles, supply_map


def explain_word(word: str, tiles: Optional[str], constraints: ConstraintsLike = None, *,
                 max_length: Optional[int] = None, policy: str = DEFAULT_POLICY) -> List[str]:
    """
    Return the reasons `word` is rejected (empty when it is playable).

    Example:
      explain_word("tart", "cart") -> ["needs 2 x 'T' but only 1 available"]
    """
    cons = ensure_constraints(constraints)
    rack = normalize_tiles(tiles)
    reasons: List[str] = []

    length_rule = create_policy(policy, rack, cons, max_length)
    if not length_rule.admits(word):
        reasons.append(length_rule.reason(word))

    w = fold_word(word)
    for c in cons:
        if c.position <= len(w) and w[c.position - 1] != c.letter:
            reasons.append(f"position {c.position} is '{w[c.position - 1]}', not '{c.letter}'")

    supply = supply_map(rack, cons)
    for ch, need in frequency_map(w).items():
        have = supply.get(ch, 0)
        if have == 0:
            reasons.append(f"no '{ch}' tile available")
        elif need > have:
            reasons.append(f"needs {need} x '{ch}' but only {have} available")

    return reasons


def is_playable(word: str, tiles: Optional[str], constraints: ConstraintsLike = None, *,
                max_length: Optional[int] = None, policy: str = DEFAULT_POLICY) -> bool:
    """True if `word` passes every check (same verdict as filter_words)."""
    return not explain_word(word, tiles, constraints, max_length=max_length, policy=policy)
