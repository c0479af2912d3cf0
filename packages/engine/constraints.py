"""
Positional constraint parsing.

A constraint string lists alternating letter / position tokens separated by
commas, e.g. "a,1,t,3" means:
  - 'A' must be the 1st letter
  - 'T' must be the 3rd letter

Positions are 1-based. A constraint whose position is past the end of a
candidate word does not apply to that word (the matcher skips it).

Letters are canonicalized to uppercase, the same as tiles.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from .tiles import fold

# Raw input accepted by the parser: the CLI string, or tokens already split.
ConstraintSpec = Union[str, Sequence[str], None]

# Anything the matcher accepts: parsed constraints, (letter, position) pairs, or a raw spec.
ConstraintsLike = Union[ConstraintSpec, Iterable["Constraint"], Iterable[Tuple[str, int]]]


class InvalidConstraintFormat(ValueError):
    """The constraint spec cannot be read as (letter, position) pairs."""


class Constraint(NamedTuple):
    letter: str    # single character, uppercased
    position: int  # 1-based slot in the target word

    def __str__(self) -> str:
        return f"{self.letter}@{self.position}"


def _tokenize(spec: ConstraintSpec) -> List[str]:
    if spec is None:
        return []
    if isinstance(spec, str):
        if not spec.strip():
            return []
        return [tok.strip() for tok in spec.split(",")]
    return [str(tok).strip() for tok in spec]


def _parse_position(tok: str, idx: int) -> int:
    # ASCII digits only: rejects "", "-1", "+1", "1.5", "x" and superscripts like "²"
    if not (tok.isascii() and tok.isdigit()) or int(tok) < 1:
        raise InvalidConstraintFormat(
            f"position token #{idx + 1} must be a positive integer; got {tok!r}")
    return int(tok)


def parse_constraints(spec: ConstraintSpec) -> List[Constraint]:
    """
    Parse a constraint spec into an ordered list of Constraint pairs.

    Examples:
      parse_constraints("a,1,t,3") -> [Constraint('A', 1), Constraint('T', 3)]
      parse_constraints("")        -> []
      parse_constraints(None)      -> []

    Raises:
      InvalidConstraintFormat on an odd token count, an empty (or multi-char)
      letter token, or a position that is not a positive integer.
    """
    tokens = _tokenize(spec)
    if not tokens:
        return []

    if len(tokens) % 2 != 0:
        raise InvalidConstraintFormat(
            f"expected letter,position pairs but got {len(tokens)} token(s): {tokens}")

    out: List[Constraint] = []
    for i in range(0, len(tokens), 2):
        letter, pos = tokens[i], tokens[i + 1]
        if len(letter) != 1:
            raise InvalidConstraintFormat(
                f"letter token #{i + 1} must be a single character; got {letter!r}")
        out.append(Constraint(fold(letter), _parse_position(pos, i + 1)))
    return out


def ensure_constraints(constraints: ConstraintsLike) -> List[Constraint]:
    """
    Accept parsed constraints, (letter, position) pairs or a raw spec and
    return parsed ones.

      ensure_constraints([("a", 1)]) -> [Constraint('A', 1)]
    """
    if constraints is None or isinstance(constraints, str):
        return parse_constraints(constraints)
    items = list(constraints)
    if all(isinstance(c, Constraint) for c in items):
        return items
    tokens: List[str] = []
    for c in items:
        if isinstance(c, (tuple, list)) and len(c) == 2:
            tokens.extend(str(part) for part in c)
        else:
            tokens.append(str(c))
    return parse_constraints(tokens)


def max_position(constraints: Iterable[Constraint]) -> int:
    """Furthest constrained slot (0 when there are no constraints)."""
    return max((c.position for c in constraints), default=0)


def format_constraints(constraints: Optional[Iterable[Constraint]]) -> str:
    """Inverse of parse_constraints: [('A', 1)] -> "A,1"."""
    if not constraints:
        return ""
    return ",".join(f"{c.letter},{c.position}" for c in constraints)
