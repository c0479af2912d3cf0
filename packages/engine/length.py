"""
Length-admissibility policies.

Two competing rules exist for deciding whether a word's length is acceptable:

  budget (default)
      A word cannot use more letters than the player can supply, so reject
      words longer than len(tiles) + len(constraints). An explicit max_length
      replaces that computed budget.

  reach
      A word must be long enough to reach the furthest constrained slot, so
      reject words shorter than the largest constraint position. max_length,
      when given, still caps the length.

Policies self-register by id, the same way the CLI looks them up by name.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Type

from .constraints import Constraint, max_position

DEFAULT_POLICY = "budget"

REGISTRY: Dict[str, Type["LengthPolicy"]] = {}


def register(cls: Type["LengthPolicy"]) -> Type["LengthPolicy"]:
    """
    Decorator: @register on a policy class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate length policy id: {pid}")
    REGISTRY[pid] = cls
    return cls


class LengthPolicy:
    id = "base"
    description = ""

    def __init__(self, tiles: str, constraints: Sequence[Constraint],
                 max_length: Optional[int] = None):
        self.tiles = tiles
        self.constraints = list(constraints)
        self.max_length = max_length

    def admits(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def reason(self, word: str) -> str:
        """Why `word` is rejected (only meaningful when admits() is False)."""
        raise NotImplementedError("Override in subclass")


@register
class BudgetPolicy(LengthPolicy):
    id = "budget"
    description = "reject words longer than tiles + constraints (or --max-length)"

    @property
    def limit(self) -> int:
        if self.max_length is not None:
            return self.max_length
        return len(self.tiles) + len(self.constraints)

    def admits(self, word: str) -> bool:
        return len(word) <= self.limit

    def reason(self, word: str) -> str:
        return f"length {len(word)} exceeds the budget of {self.limit} letter(s)"


@register
class ReachPolicy(LengthPolicy):
    id = "reach"
    description = "reject words shorter than the furthest constrained position"

    @property
    def minimum(self) -> int:
        return max_position(self.constraints)

    def admits(self, word: str) -> bool:
        if self.max_length is not None and len(word) > self.max_length:
            return False
        return len(word) >= self.minimum

    def reason(self, word: str) -> str:
        if self.max_length is not None and len(word) > self.max_length:
            return f"length {len(word)} exceeds --max-length {self.max_length}"
        return f"length {len(word)} does not reach constrained position {self.minimum}"


def create_policy(policy_id: str, tiles: str, constraints: Sequence[Constraint],
                  max_length: Optional[int] = None) -> LengthPolicy:
    """
    Factory: instantiate a registered length policy by id.
    """
    try:
        cls = REGISTRY[policy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown length policy: {policy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(tiles, constraints, max_length)


def get_policy_ids() -> List[str]:
    """
    Return all registered policy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
