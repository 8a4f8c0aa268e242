"""
Tests for word checks, the dictionary and scoring.
"""

import pytest

from src.game.lexicon import (
    Lexicon,
    default_lexicon,
    is_english_word,
    is_word,
    load_lexicon,
    player_score,
    word_value,
)
from src.shared.exceptions import LexiconError


@pytest.mark.parametrize("word", ["cat", "care", "abcdefgh"])
def test_is_word_accepts_letters(word):
    assert is_word(word)


@pytest.mark.parametrize("word", ["", "at", "ca7", "c-a-t", "café", "two words"])
def test_is_word_rejects_malformed(word):
    assert not is_word(word)


def test_lexicon_membership_and_prefixes(small_lexicon):
    assert small_lexicon.is_english_word("CAT")
    assert "care" in small_lexicon
    assert not small_lexicon.is_english_word("tea")
    assert small_lexicon.has_prefix("ca")
    assert small_lexicon.has_prefix("car")
    assert not small_lexicon.has_prefix("care")
    assert len(small_lexicon) == 3
    assert list(small_lexicon) == ["car", "care", "cat"]


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# comment\nApple\n\nbanana\n", encoding="utf-8")
    lexicon = Lexicon.from_file(path)
    assert lexicon.words == frozenset({"apple", "banana"})


def test_from_file_errors(tmp_path):
    with pytest.raises(LexiconError):
        Lexicon.from_file(tmp_path / "missing.txt")
    empty = tmp_path / "empty.txt"
    empty.write_text("\n", encoding="utf-8")
    with pytest.raises(LexiconError):
        Lexicon.from_file(empty)


def test_default_lexicon_is_bundled_and_cached():
    lexicon = default_lexicon()
    assert lexicon is default_lexicon()
    assert is_english_word("care")
    assert not is_english_word("qzxv")


def test_load_lexicon_by_path(tmp_path):
    path = tmp_path / "mini.txt"
    path.write_text("zebra\n", encoding="utf-8")
    assert load_lexicon(str(path)).words == frozenset({"zebra"})


def test_word_value_counts_letters():
    assert word_value("cat") == 3
    assert word_value("care") == 4


def test_player_score_unique_words_only():
    assert player_score(["cat", "car"], ["car", "care"]) == 3
    assert player_score(["car", "care"], ["cat", "car"]) == 4
    assert player_score(["cat", "car", "care"], []) == 10
    assert player_score([], ["cat"]) == 0
    # duplicates in the player's own list count once
    assert player_score(["cat", "cat"], []) == 3


def test_from_file_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"cat\ncaf\xe9\ncare\n")
    with pytest.raises(LexiconError):
        Lexicon.from_file(path)


def test_default_lexicon_follows_environment(tmp_path, monkeypatch):
    default_lexicon()
    path = tmp_path / "custom.txt"
    path.write_text("zzz\n", encoding="utf-8")
    monkeypatch.setenv("BOGGLE_DICTIONARY", str(path))
    assert "zzz" in default_lexicon()
    monkeypatch.delenv("BOGGLE_DICTIONARY")
    assert "zzz" not in default_lexicon()
