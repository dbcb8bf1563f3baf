import itertools

import pytest
from packages.engine import (
    Dictionary, MalformedPattern, MalformedWord,
    decode_pattern, encode_pattern, filter_candidates, filter_history,
    is_solved, normalize_word, parse_pattern, score,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("speed","erase","Y-YY-"),   # ERASE has two E's: both guessed E's are present
    ("speed","abide","--Y-Y"),   # one E present, the excess E absent
    ("apple","angle","G--GG"),
    ("ample","apple","G-GGG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","-GGGYY"),
    ("little","letter","G-GG-Y"),
    ("planet","palate","GYY-YY"),
    ("kitten","tinket","YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_excess_letter_is_absent_after_exact_match():
    # the green E consumes the only E; the earlier E must stay gray
    assert score("eerie", "crane") == "--Y-G"

@pytest.mark.parametrize("patt,code", [
    ("-----", 0), ("Y----", 1), ("G----", 2), ("-G---", 6), ("GGGGG", 242),
])
def test_encode_pattern(patt, code):
    assert encode_pattern(patt) == code
    assert decode_pattern(code, 5) == patt

def test_decode_pattern_out_of_range():
    with pytest.raises(ValueError):
        decode_pattern(243, 5)

def test_parse_pattern_aliases():
    assert parse_pattern("gyBx.") == "GY---"
    assert parse_pattern(" GG_yy ") == "GG-YY"

@pytest.mark.parametrize("bad", ["gyg", "gygygy", "gyzg-", ""])
def test_parse_pattern_rejects(bad):
    with pytest.raises(MalformedPattern):
        parse_pattern(bad)

def test_is_solved():
    assert is_solved("GGGGG")
    assert not is_solved("GGGG-")
    assert not is_solved("")

def test_filter_candidates_keeps_order():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    cand = filter_candidates(words, "raise", "YY--G")
    assert cand == ("crane", "trace")

def test_filter_candidates_empty_is_legal():
    assert filter_candidates(["apple"], "apple", "-----") == ()

def test_filter_history_n6_basic():
    words = ["letter","settle","little","tattle","better"]
    cand = filter_history(words, [("settle","-GGGYY")])
    assert "letter" in cand and "better" not in cand

WORDS = ["crane", "raise", "stare", "speed", "erase", "abide", "level", "belle", "eerie", "apple"]

def test_filter_soundness_monotonicity_idempotence():
    for guess, secret in itertools.product(WORDS, repeat=2):
        p = score(guess, secret)
        once = filter_candidates(WORDS, guess, p)
        assert secret in once
        assert len(once) <= len(WORDS)
        assert filter_candidates(once, guess, p) == once

def test_normalize_word():
    assert normalize_word(" CRANE ") == "crane"
    for bad in ["cran", "cranes", "cr4ne", "crâne", None]:
        with pytest.raises(MalformedWord):
            normalize_word(bad)

def test_dictionary_dedupes_and_indexes():
    d = Dictionary(["Crane", "raise", "crane", "stare"])
    assert d.words == ("crane", "raise", "stare")
    assert len(d) == 3 and "raise" in d and "trace" not in d
    assert d.index_of("stare") == 2
    assert d.digest == Dictionary(["crane", "raise", "stare"]).digest
    assert d.digest != Dictionary(["raise", "crane", "stare"]).digest

def test_dictionary_rejects_malformed():
    with pytest.raises(MalformedWord):
        Dictionary(["crane", "cranes"])
