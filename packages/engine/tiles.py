"""
Tile normalization and letter frequency maps.

Conventions:
  - Tiles arrive as free-form text ("c,a,r,t", "C A R T", "cart").
    Commas and whitespace are separators only and are dropped.
  - Everything is canonicalized to UPPERCASE before counting, one character
    at a time: a character whose uppercase form is longer ('ß' -> 'SS')
    is kept as-is, so a word never changes length when folded.

The "supply" is what the player can spell with: the tiles in hand plus one
copy of every constrained letter (a letter fixed on a slot still has to be
physically available there).
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from .constraints import Constraint

_SEPARATORS = {","}


def fold(ch: str) -> str:
    """
    Uppercase a single character without changing its length.
    """
    up = ch.upper()
    return up if len(up) == 1 else ch


def fold_word(chars: Iterable[str]) -> str:
    """
    "straße" -> "STRAßE" (same length as the input)
    """
    return "".join(fold(ch) for ch in chars)


def normalize_tiles(raw: Optional[str]) -> str:
    """
    "c, a r,t" -> "CART"
    """
    if not raw:
        return ""
    return fold_word(ch for ch in raw if ch not in _SEPARATORS and not ch.isspace())


def frequency_map(chars: Iterable[str]) -> Counter[str]:
    """
    Exact occurrence count per character (order independent, not capped).
    """
    return Counter(chars)


def supply_map(tiles: str, constraints: Iterable[Constraint]) -> Counter[str]:
    """
    Frequency map of the normalized tiles plus every constraint letter.

    Example:
      supply_map("xyz", [Constraint("Q", 2)]) -> {'X': 1, 'Y': 1, 'Z': 1, 'Q': 1}
    """
    supply = frequency_map(normalize_tiles(tiles))
    supply.update(c.letter for c in constraints)
    return supply
