from pathlib import Path

import pytest
import packages.datasets as ds
from packages.datasets import load_dictionary, pretty_summary, validate_wordlist
from packages.engine import MalformedWord


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words_5.txt"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["words"]["count"] == 3 and len(rep["words"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "OK" in s


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'Raiser' not lowercase
    p = tmp_path / "words_6.txt"
    p.write_text("raiser\ncrane\n???\nRaiser\n\n", encoding="utf-8")

    rep = validate_wordlist(6, str(p))
    assert rep["passed"] is False
    assert rep["words"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates_and_missing(tmp_path: Path):
    p = tmp_path / "dups.txt"
    _write(p, ["crane", "raise", "crane"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert any("duplicate" in msg for msg in rep["issues"])

    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["words"]["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_dictionary(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\n\nraise\ncrane\n", encoding="utf-8")
    d = load_dictionary(p)
    assert d.words == ("crane", "raise")

    _write(p, ["crane", "cr4ne"])
    with pytest.raises(MalformedWord):
        load_dictionary(p)
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")


def test_public_api():
    assert sorted(ds.__all__) == ["load_dictionary", "pretty_summary", "read_lines", "validate_wordlist"]
