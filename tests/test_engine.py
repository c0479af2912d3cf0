from collections import Counter

import pytest
from packages.engine import (
    Constraint,
    InvalidConstraintFormat,
    create_policy,
    explain_word,
    filter_words,
    fits_positions,
    fits_supply,
    frequency_map,
    get_policy_ids,
    is_playable,
    max_position,
    normalize_tiles,
    parse_constraints,
    supply_map,
)
from packages.engine.tiles import fold_word

WORDS = ["cat", "car", "art", "tar", "cart"]


# --- constraint parsing ---
@pytest.mark.parametrize("spec,expected", [
    ("a,1,t,3", [Constraint("A", 1), Constraint("T", 3)]),
    (" q , 2 ", [Constraint("Q", 2)]),
    ("T,10", [Constraint("T", 10)]),
    (["a", "1"], [Constraint("A", 1)]),
])
def test_parse_constraints_golden(spec, expected):
    assert parse_constraints(spec) == expected


@pytest.mark.parametrize("spec", ["", "   ", None, []])
def test_parse_constraints_empty(spec):
    assert parse_constraints(spec) == []


@pytest.mark.parametrize("spec", [
    "a,1,b",      # odd token count
    "a,1,",       # trailing comma -> odd
    ",1",         # empty letter
    "ab,1",       # multi-char letter
    "a,x",        # non-numeric position
    "a,0",        # not positive
    "a,-1",
    "a,1.5",
    "a,²",      # superscript two is a digit but not a base-10 number
    "a,",         # empty position
])
def test_parse_constraints_rejects(spec):
    with pytest.raises(InvalidConstraintFormat):
        parse_constraints(spec)


def test_invalid_constraint_format_is_value_error():
    with pytest.raises(ValueError):
        parse_constraints("a,1,b")


def test_max_position():
    assert max_position([]) == 0
    assert max_position(parse_constraints("a,1,t,3,s,2")) == 3


# --- tiles / frequency maps ---
@pytest.mark.parametrize("raw,expected", [
    ("c,a,r,t", "CART"),
    ("c a\tr, t", "CART"),
    ("cart", "CART"),
    ("", ""),
    (None, ""),
])
def test_normalize_tiles(raw, expected):
    assert normalize_tiles(raw) == expected


def test_frequency_map_order_independent():
    assert frequency_map("AABB") == frequency_map("BABA") == Counter({"A": 2, "B": 2})


def test_supply_map_includes_constraint_letters():
    supply = supply_map("xyz", parse_constraints("q,2"))
    assert supply == Counter({"X": 1, "Y": 1, "Z": 1, "Q": 1})
    # a constrained letter already in hand adds a second copy
    assert supply_map("cart", parse_constraints("t,1"))["T"] == 2


# --- predicates ---
def test_fits_positions_vacuous_past_end():
    cons = parse_constraints("c,1,s,5")
    assert fits_positions("cat", cons) is True
    assert fits_positions("bat", cons) is False


def test_fits_supply_short_circuits_on_missing_letter():
    supply = Counter({"A": 2, "B": 2})
    assert fits_supply("aab", supply) is True
    assert fits_supply("aaab", supply) is False
    assert fits_supply("abc", supply) is False


# --- filter pipeline scenarios ---
def test_scenario_all_words_from_cart():
    assert filter_words(WORDS, "cart", "") == WORDS


def test_scenario_first_letter_t():
    assert filter_words(WORDS, "cart", "t,1") == ["tar"]


def test_scenario_supply_limits():
    words = ["ab", "aab", "abb", "aabb", "aaab"]
    assert filter_words(words, "aabb", None) == ["ab", "aab", "abb", "aabb"]


def test_scenario_constraint_letter_not_in_tiles():
    assert filter_words(["xq", "xqy"], "xyz", "q,2") == ["xq", "xqy"]


def test_filter_accepts_parsed_constraints():
    cons = parse_constraints("t,1")
    assert filter_words(WORDS, "c,a,r,t", cons) == ["tar"]


def test_filter_vacuous_constraint_never_disqualifies():
    assert filter_words(["cat", "cats"], "cat", "s,5") == ["cat", "cats"]


def test_filter_budget_rejects_too_long():
    # 3 tiles, no constraints -> words longer than 3 are out
    assert filter_words(["car", "cart"], "car", None) == ["car"]


def test_filter_max_length_overrides_budget():
    assert filter_words(WORDS, "cart", None, max_length=3) == ["cat", "car", "art", "tar"]


def test_filter_reach_policy():
    words = ["cat", "cart", "art"]
    assert filter_words(words, "cart", "t,4", policy="reach") == ["cart"]
    # without constraints every length is reachable
    assert filter_words(words, "cart", None, policy="reach") == words


def test_filter_case_insensitive_keeps_source_spelling():
    assert filter_words(["Cat", "TAR", "dog"], "C,A,R,T", "a,2") == ["Cat", "TAR"]


def test_filter_empty_inputs():
    assert filter_words([], "cart", "t,1") == []
    assert filter_words(WORDS, "", None) == []
    assert filter_words(WORDS, "zzz", None) == []


def test_filter_raw_constraints_parse_errors_propagate():
    with pytest.raises(InvalidConstraintFormat):
        filter_words(WORDS, "cart", "a,1,b")


def test_unknown_policy():
    assert get_policy_ids() == ["budget", "reach"]
    with pytest.raises(ValueError):
        filter_words(WORDS, "cart", None, policy="longest")
    with pytest.raises(ValueError):
        create_policy("nope", "CART", [])


# --- properties over the same inputs ---
@pytest.mark.parametrize("tiles,cons", [
    ("cart", ""),
    ("aelrst", "s,1"),
    ("eeinrst", "t,3,r,6"),
    ("xyz", "q,2"),
])
def test_filter_properties(tiles, cons):
    words = ["rat", "star", "tears", "stare", "street", "tinsel", "xq", "teen", "cart", "tract"]
    first = filter_words(words, tiles, cons)
    second = filter_words(words, tiles, cons)
    assert first == second  # idempotent

    # order preserved: result is a subsequence of the input
    it = iter(words)
    assert all(any(w == x for x in it) for w in first)

    parsed = parse_constraints(cons)
    supply = supply_map(tiles, parsed)
    for w in first:
        for ch, n in Counter(w.upper()).items():
            assert n <= supply[ch]
        for c in parsed:
            if c.position <= len(w):
                assert w[c.position - 1].upper() == c.letter


# --- single-word diagnosis ---
def test_explain_word_playable():
    assert explain_word("cart", "cart") == []
    assert is_playable("tar", "cart", "t,1") is True


def test_explain_word_reasons():
    assert explain_word("tart", "cart") == ["needs 2 x 'T' but only 1 available"]
    assert explain_word("cats", "cart", "c,1") == ["no 'S' tile available"]
    assert explain_word("cat", "cart", "t,1") == ["position 1 is 'C', not 'T'"]

    reasons = explain_word("dog", "cat", max_length=2)
    assert reasons[0] == "length 3 exceeds the budget of 2 letter(s)"
    assert len(reasons) == 4


def test_explain_agrees_with_filter():
    words = ["cat", "tact", "arc", "scar", "tracts"]
    for tiles, cons in [("cart", ""), ("cart", "a,2"), ("acrtt", "s,1")]:
        expected = filter_words(words, tiles, cons)
        assert [w for w in words if is_playable(w, tiles, cons)] == expected


# --- (letter, position) pairs ---
@pytest.mark.parametrize("pairs", [[("t", 1)], [["t", "1"]], [Constraint("T", 1)]])
def test_filter_accepts_letter_position_pairs(pairs):
    assert filter_words(WORDS, "cart", pairs) == ["tar"]


def test_pairs_with_bad_position_still_rejected():
    with pytest.raises(InvalidConstraintFormat):
        filter_words(WORDS, "cart", [("t", 0)])


# --- case folding never changes a word's length ---
def test_fold_word_keeps_length():
    assert fold_word("straße") == "STRAßE"
    assert normalize_tiles("ß, ﬁ") == "ßﬁ"


def test_filter_positions_line_up_after_folding():
    cons = parse_constraints("e,6")
    assert fits_positions("straße", cons) is True
    assert filter_words(["straße"], "straße", cons) == ["straße"]
    # the word's own 'ß' is needed, 'SS' tiles are not a substitute
    assert explain_word("straße", "strasse", cons) == ["no 'ß' tile available"]
