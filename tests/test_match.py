from profanityout.match import Match, Matches, WordType


def test_match_word_type_predicates():
    s = Match()

    s.word_type = WordType.SUSPECT
    assert s.word_type == WordType.SUSPECT
    assert s.is_suspect() is True

    s.word_type = WordType.PROFANITY
    assert s.word_type == WordType.PROFANITY
    assert s.is_profane() is True
    assert s.is_suspect() is False
    assert s.is_false_positive() is False

    s.word_type = WordType.FALSE_POSITIVE
    assert s.word_type == WordType.FALSE_POSITIVE
    assert s.is_false_positive() is True
    assert s.is_suspect() is False


def test_word_type_ordering():
    matches = [
        Match(word="fp", word_type=WordType.FALSE_POSITIVE),
        Match(word="sus", word_type=WordType.SUSPECT),
        Match(word="prof", word_type=WordType.PROFANITY),
    ]
    ordered = sorted(matches, key=lambda m: m.word_type)
    assert [m.word for m in ordered] == ["sus", "prof", "fp"]

    unset = Match()
    assert unset.word_type < WordType.SUSPECT
    assert unset.is_profane() is False
    assert unset.is_suspect() is False
    assert unset.is_false_positive() is False


def test_matches_helpers():
    s = Matches(
        [
            Match(word="bass", word_type=WordType.FALSE_POSITIVE),
            Match(word="ass", word_type=WordType.PROFANITY),
        ]
    )

    assert s.has_profane_match() is True
    assert s.get_first_profane_match().word == "ass"
    assert len(s.get_profane_matches()) == 1

    assert s.has_suspect_match() is False
    assert len(s.get_suspect_matches()) == 0

    assert s.has_false_positive_match() is True
    assert len(s.get_false_positive_matches()) == 1


def test_empty_matches():
    s = Matches()
    assert s.has_profane_match() is False
    assert s.get_first_profane_match() is None
    assert s.get_profane_matches() == []


def test_filtered_matches_are_matches():
    s = Matches([Match(word="x", word_type=WordType.SUSPECT)])
    suspects = s.get_suspect_matches()
    assert isinstance(suspects, Matches)
    assert suspects.has_suspect_match() is True