from profanityout import wordlists_en as en
from profanityout.detector import ProfanityDetector


def _detector(match_whole_word=True):
    return (
        ProfanityDetector()
        .with_profane_words(en.DEFAULT_PROFANITIES)
        .with_false_positive_words(en.DEFAULT_FALSE_POSITIVES)
        .with_suspect_words(en.DEFAULT_SUSPECTS)
        .with_leet_speak_characters(en.LEET_SPEAK_CHARACTERS)
        .with_special_characters(en.SPECIAL_CHARACTERS)
        .with_wildcard_characters(en.WILDCARD_CHARACTERS)
        .with_match_whole_word(match_whole_word)
    )


def test_profanities_and_false_positives_are_disjoint():
    assert not set(en.DEFAULT_PROFANITIES) & set(en.DEFAULT_FALSE_POSITIVES)
    d = _detector()
    for word in en.DEFAULT_FALSE_POSITIVES:
        matches = d.scan_profanity(word)
        assert matches.has_profane_match() is False
        assert matches.has_false_positive_match() is True
        assert matches[0].word == word


def test_words_are_lower_case():
    d = _detector()
    for word in en.DEFAULT_PROFANITIES + en.DEFAULT_FALSE_POSITIVES:
        assert word == word.lower()
    for word in en.DEFAULT_PROFANITIES:
        assert d.is_profane(word.upper()) is True


def test_eta_variant_present():
    d = _detector()
    assert d.scan_profanity("bitcη").get_first_profane_match().word == "bitcη"
    assert d.scan_profanity("bitch").get_first_profane_match().word == "bitch"


def test_suspects_empty():
    assert len(en.DEFAULT_SUSPECTS) == 0
    d = _detector()
    assert d.scan_profanity("suspect").has_suspect_match() is False


def test_false_positives_contain_profanity():
    d = (
        ProfanityDetector()
        .with_profane_words(en.DEFAULT_PROFANITIES)
        .with_leet_speak_characters(en.LEET_SPEAK_CHARACTERS)
        .with_special_characters(en.SPECIAL_CHARACTERS)
        .with_match_whole_word(False)
    )
    for word in en.DEFAULT_FALSE_POSITIVES:
        assert d.is_profane(word) is True


def test_leet_values_are_single_lower_letters():
    for key, value in en.LEET_SPEAK_CHARACTERS.items():
        assert len(key) == 1
        assert len(value) == 1
        assert value.isascii() and value.islower()


def test_leet_pinned_values():
    assert en.LEET_SPEAK_CHARACTERS["4"] == "a"
    assert en.LEET_SPEAK_CHARACTERS["$"] == "s"
    assert en.LEET_SPEAK_CHARACTERS["η"] == "n"
    assert en.LEET_SPEAK_CHARACTERS["\u212a"] == "k"
    d = _detector()
    assert d.is_profane("4ss") is True
    assert d.is_profane("a$$") is True
    assert d.is_profane("pe\u03b7is") is True
    assert d.is_profane("coc\u212a") is True


def test_special_characters_all_map_to_space():
    assert set(en.SPECIAL_CHARACTERS.values()) == {" "}
    assert "_" in en.SPECIAL_CHARACTERS


def test_wildcards_map_to_star():
    assert en.WILDCARD_CHARACTERS == {"*": "*", "?": "*"}
    d = _detector().with_sanitize_wildcard_characters(True)
    assert d.scan_profanity("x sh**t").get_first_profane_match().word == "shit"