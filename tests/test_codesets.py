from pathlib import Path

import pytest

from packages.codesets import (
    all_secrets,
    load_secrets,
    pretty_summary,
    sample_secrets,
    validate_secret_list,
    write_secrets,
)
from packages.engine import Alphabet, DEFAULT_ALPHABET


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_all_secrets_enumerates_in_alphabet_order():
    two = list(all_secrets(2))
    assert len(two) == 36
    assert two[:3] == ["BB", "BA", "BC"]
    assert list(all_secrets(2, Alphabet("01"))) == ["00", "01", "10", "11"]

def test_sample_secrets_is_seeded_and_bounded():
    a = sample_secrets(50, min_length=3, max_length=9, seed=11)
    b = sample_secrets(50, min_length=3, max_length=9, seed=11)
    assert a == b
    assert all(3 <= len(s) <= 9 for s in a)
    assert all(ch in DEFAULT_ALPHABET for s in a for ch in s)

def test_validate_secret_list_happy_path(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    _write(p, ["ABC", "UXIB", "CCCCCC"])
    rep = validate_secret_list(str(p))
    assert rep["passed"] is True
    assert (rep["count"], rep["min_len"], rep["max_len"]) == (3, 3, 6)
    s = pretty_summary(rep)
    assert "secrets=3" in s and s.endswith("OK")

def test_validate_secret_list_flags_errors(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    # lowercase, foreign symbol, over-long, duplicate
    _write(p, ["ABC", "abc", "ABZ", "B" * 19, "ABC"])
    rep = validate_secret_list(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert rep["unique_count"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])

def test_validate_secret_list_missing_file(tmp_path: Path):
    rep = validate_secret_list(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False

def test_write_then_load(tmp_path: Path):
    path = write_secrets(["ABC", "", "  XIU  "], tmp_path / "s.txt")
    assert load_secrets(path) == ["ABC", "XIU"]

def test_write_secrets_drops_blanks_and_load_missing(tmp_path: Path):
    path = write_secrets(["ABC", "   ", "UU"], tmp_path / "nested" / "s.txt")
    assert Path(path).read_text(encoding="utf-8") == "ABC\nUU\n"
    with pytest.raises(FileNotFoundError):
        load_secrets(tmp_path / "missing.txt")
