from .constraints import Constraint, InvalidConstraintFormat, parse_constraints, max_position
from .tiles import normalize_tiles, frequency_map, supply_map
from .length import DEFAULT_POLICY, create_policy, get_policy_ids
from .matcher import filter_words, fits_positions, fits_supply
from .validation import explain_word, is_playable

__all__ = [
    "Constraint", "InvalidConstraintFormat", "parse_constraints", "max_position",
    "normalize_tiles", "frequency_map", "supply_map",
    "DEFAULT_POLICY", "create_policy", "get_policy_ids",
    "filter_words", "fits_positions", "fits_supply",
    "explain_word", "is_playable",
]
