"""
Word filtering: which words can be played from a rack of tiles.

Given:
  - a word list (any iterable of strings, order matters)
  - the player's tiles (raw text, normalized here)
  - positional constraints (parsed, or a raw "a,1,t,3" string)

Return:
  - the words that pass all three passes, in their original order.

Passes (each narrows the previous result):
  1) length    : the selected length policy admits the word
  2) positions : every constraint that fits inside the word matches
  3) supply    : the word's letter counts never exceed tiles + constraint letters

Words are compared uppercased but returned exactly as given.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from .constraints import Constraint, ConstraintsLike, ensure_constraints
from .length import DEFAULT_POLICY, create_policy
from .tiles import fold_word, frequency_map, normalize_tiles, supply_map

logger = logging.getLogger(__name__)


def fits_positions(word: str, constraints: Sequence[Constraint]) -> bool:
    """
    True if every applicable constraint holds for `word`.
    Constraints past the end of the word are skipped, not failed.
    """
    w = fold_word(word)
    for c in constraints:
        if c.position > len(w):
            continue
        if w[c.position - 1] != c.letter:
            return False
    return True


def fits_supply(word: str, supply: Counter[str]) -> bool:
    """
    True if `supply` holds at least as many of each letter as `word` needs.
    """
    for ch, need in frequency_map(fold_word(word)).items():
        have = supply.get(ch)
        if not have:
            return False  # letter not available at all
        if need > have:
            return False
    return True


def filter_words(
        words: Iterable[str],
        tiles: Optional[str],
        constraints: ConstraintsLike = None,
        *,
        max_length: Optional[int] = None,
        policy: str = DEFAULT_POLICY,
) -> List[str]:
    """
    Keep only the words that can be played with `tiles` under `constraints`.

    Args:
      words       : candidate words (e.g., a loaded dictionary)
      tiles       : the player's tiles; commas/whitespace ignored, any case
      constraints : list of Constraint, a raw spec string, or None
      max_length  : explicit maximum word length (overrides the tile budget)
      policy      : length policy id ("budget" or "reach")

    Returns:
      List[str] of playable words (order preserved as in `words`).

    Raises:
      InvalidConstraintFormat if `constraints` is a malformed raw spec.
      ValueError for an unknown policy id.
    """
    cons = ensure_constraints(constraints)
    rack = normalize_tiles(tiles)
    length_rule = create_policy(policy, rack, cons, max_length)

    pool = list(words)
    if not pool:
        logger.debug("empty word list; nothing to filter")
        return []

    # 1) length admissibility
    out = [w for w in pool if length_rule.admits(w)]

    # 2) positional match
    if cons:
        out = [w for w in out if fits_positions(w, cons)]

    # 3) supply match
    supply = supply_map(rack, cons)
    out = [w for w in out if fits_supply(w, supply)]

    logger.debug("%d of %d words playable with tiles=%r constraints=%s policy=%s",
                 len(out), len(pool), rack, [str(c) for c in cons], policy)
    return out
