import unicodedata

import pytest

from profanityout.util import normalize_as_nfc, remove_accents


def test_remove_accents_known_word():
    assert remove_accents("fúck") == "fuck"


@pytest.mark.parametrize("text", ["hello", "x a$$hol3 ", "", "~ !"])
def test_ascii_is_unchanged(text):
    assert remove_accents(text) == text
    assert normalize_as_nfc(text) == text


@pytest.mark.parametrize("text", ["ÄšŚ", "pÓöp", "bitčh", " fučk", "ĂżŽ"])
def test_remove_accents_leaves_no_combining_marks(text):
    result = remove_accents(text)
    assert all(unicodedata.category(ch) != "Mn" for ch in unicodedata.normalize("NFD", result))
    assert remove_accents(result) == result
    assert len(result) == len(text)


def test_normalize_composes_decomposed_text():
    assert normalize_as_nfc("e\u0301") == "\u00e9"


@pytest.mark.parametrize("text", ["fúck", "e\u0301", "βιτ⊂η"])
def test_normalize_is_idempotent(text):
    once = normalize_as_nfc(text)
    assert normalize_as_nfc(once) == once
    assert unicodedata.is_normalized("NFC", once)


def test_non_accented_unicode_preserved():
    assert remove_accents("βιτ⊂η") == "βιτ⊂η"