"""Tests for the word-level corrector and the misspelling dictionary."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from md_autocorrect import (
    DEFAULT_DICTIONARY, Correction, correct, iter_corrections, load_dictionary,
    match_case, merge_dictionaries,
)
from md_autocorrect.corrector import lookup

WORDS = {"absoltely": "absolutely", "accodringly": "accordingly", "teh": "the", "febuary": "February"}


# ── Corrector ────────────────────────────────────────────────────────

def test_correct_plain_prose():
    assert correct("I absoltely hate...", WORDS) == "I absolutely hate..."


def test_first_letter_case_carried_over():
    assert correct("Accodringly we made...", WORDS) == "Accordingly we made..."


def test_only_first_letter_adjusted():
    assert correct("TEH", WORDS) == "The"


def test_correction_casing_kept_verbatim():
    assert correct("in febuary", WORDS) == "in February"
    assert correct("Febuary", WORDS) == "February"


def test_punctuation_and_whitespace_preserved():
    assert correct("teh, teh!\n\t(teh) 'teh'", WORDS) == "the, the!\n\t(the) 'the'"


def test_word_runs_include_joiners():
    # hyphen, apostrophes and backtick are part of the token
    assert correct("teh-teh teh's teh’s teh`", WORDS) == "teh-teh teh's teh’s teh`"


def test_unicode_letters_are_word_characters():
    assert correct("tehé", WORDS) == "tehé"


def test_unknown_words_untouched():
    assert correct("nothing to see here", WORDS) == "nothing to see here"


def test_ignore_words():
    assert correct("teh absoltely", WORDS, frozenset({"teh"})) == "teh absolutely"
    assert correct("Teh", WORDS, {"teh"}) == "Teh"


def test_match_case():
    assert match_case("Teh", "the") == "The"
    assert match_case("teh", "The") == "The"
    assert match_case("1teh", "the") == "the"


def test_lookup():
    assert lookup("Absoltely", WORDS) == "Absolutely"
    assert lookup("absolutely", WORDS) is None
    assert lookup("teh", WORDS, {"teh"}) is None


def test_iter_corrections_offsets():
    found = list(iter_corrections("a Teh b teh", WORDS))
    assert found == [
        Correction(start=2, end=5, original="Teh", replacement="The"),
        Correction(start=8, end=11, original="teh", replacement="the"),
    ]


# ── Dictionary ───────────────────────────────────────────────────────

def test_default_dictionary_entries():
    assert DEFAULT_DICTIONARY["absoltely"] == "absolutely"
    assert DEFAULT_DICTIONARY["accodringly"] == "accordingly"
    assert DEFAULT_DICTIONARY["defenately"] == "definitely"


def test_default_dictionary_read_only():
    with pytest.raises(TypeError):
        DEFAULT_DICTIONARY["teh"] = "tea"


def test_default_dictionary_keys_lowercase():
    assert all(k == k.lower() for k in DEFAULT_DICTIONARY)


def test_default_dictionary_closed_under_one_step():
    assert not any(v.lower() in DEFAULT_DICTIONARY for v in DEFAULT_DICTIONARY.values())


def test_merge_later_wins_and_inputs_untouched():
    extra = {"Teh": "tea"}
    merged = merge_dictionaries(DEFAULT_DICTIONARY, extra)
    assert merged["teh"] == "tea"
    assert DEFAULT_DICTIONARY["teh"] == "the"
    assert extra == {"Teh": "tea"}


def test_load_dictionary(tmp_path):
    path = tmp_path / "words.yaml"
    path.write_text("Colour: color\nrecieve: receive\n", encoding="utf-8")
    loaded = load_dictionary(path)
    assert dict(loaded) == {"colour": "color", "recieve": "receive"}


def test_load_dictionary_rejects_non_mapping(tmp_path):
    path = tmp_path / "words.yaml"
    path.write_text("- colour\n- color\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_dictionary(path)


def test_load_dictionary_rejects_bad_entry(tmp_path):
    path = tmp_path / "words.yaml"
    path.write_text("colour: 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_dictionary(path)
