"""Profanity detector built on a dictionary tree and configurable sanitizing."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping, Optional, Tuple

from profanityout.match import Matches, WordType
from profanityout.radix_tree import Tree
from profanityout.scanner import Scanner
from profanityout.settings import (
    ConfidenceCalculator,
    DetectorOption,
    DetectorSettings,
)


class ProfanityDetector:
    """Detects and censors dictionary words in text.

    Configuration methods return the detector itself so calls can be chained.
    Options passed to the scanning methods apply to that call only.
    """

    def __init__(self) -> None:
        self.settings = DetectorSettings()
        self.special_characters: Optional[Mapping[str, str]] = None
        self.leet_speak_characters: Optional[Mapping[str, str]] = None
        self.wildcard_characters: Optional[Mapping[str, str]] = None
        self.tree = Tree()

    def _add_words(self, words: Iterable[str], word_type: WordType) -> "ProfanityDetector":
        for word in words:
            self.tree.add(word, word_type)
        return self

    def with_profane_words(self, words: Iterable[str]) -> "ProfanityDetector":
        """Add profane words to the dictionary."""
        return self._add_words(words, WordType.PROFANITY)

    def with_suspect_words(self, words: Iterable[str]) -> "ProfanityDetector":
        """Add suspect words to the dictionary."""
        return self._add_words(words, WordType.SUSPECT)

    def with_false_positive_words(self, words: Iterable[str]) -> "ProfanityDetector":
        """Add words that look profane but are not."""
        return self._add_words(words, WordType.FALSE_POSITIVE)

    def with_leet_speak_characters(self, chars: Mapping[str, str]) -> "ProfanityDetector":
        """Set the leet speak replacement table."""
        self.leet_speak_characters = chars
        return self

    def with_special_characters(self, chars: Mapping[str, str]) -> "ProfanityDetector":
        """Set the special character replacement table."""
        self.special_characters = chars
        return self

    def with_wildcard_characters(self, chars: Mapping[str, str]) -> "ProfanityDetector":
        """Set the wildcard character table."""
        self.wildcard_characters = chars
        return self

    def with_sanitize_leet_speak(self, sanitize: bool) -> "ProfanityDetector":
        """Treat leet speak characters as the letters they stand for, e.g. "4sshol3"."""
        self.settings.sanitize_leet_speak = sanitize
        return self

    def with_sanitize_special_characters(self, sanitize: bool) -> "ProfanityDetector":
        """Ignore special characters inside words, e.g. "fu_ck"."""
        self.settings.sanitize_special_characters = sanitize
        return self

    def with_sanitize_spaces(self, sanitize: bool) -> "ProfanityDetector":
        """Ignore spaces inside words, e.g. "f u c k"."""
        self.settings.sanitize_spaces = sanitize
        return self

    def with_sanitize_accents(self, sanitize: bool) -> "ProfanityDetector":
        """Strip accents before matching, e.g. "fúck"."""
        self.settings.sanitize_accents = sanitize
        return self

    def with_sanitize_repeated_characters(self, sanitize: bool) -> "ProfanityDetector":
        """Collapse repeated characters, e.g. "fuuck"."""
        self.settings.sanitize_repeated_characters = sanitize
        return self

    def with_sanitize_wildcard_characters(self, sanitize: bool) -> "ProfanityDetector":
        """Let wildcard characters stand for any letter, e.g. "f**k"."""
        self.settings.sanitize_wildcard_characters = sanitize
        return self

    def with_process_input_as_html(self, as_html: bool) -> "ProfanityDetector":
        """Skip HTML tags and decode HTML entities in the input."""
        self.settings.process_input_as_html = as_html
        return self

    def with_match_whole_word(self, match_whole_word: bool) -> "ProfanityDetector":
        """Only match words bounded by whitespace, so "xass" is not profane."""
        self.settings.match_whole_word = match_whole_word
        return self

    def with_confidence_calculator(
        self, calculator: ConfidenceCalculator
    ) -> "ProfanityDetector":
        """Set the function deciding whether a candidate match is accepted."""
        self.settings.confidence_calculator = calculator
        return self

    def with_censor_character(self, censor_character: str) -> "ProfanityDetector":
        """Set the character used to censor profanities (default ``*``)."""
        self.settings.censor_character = censor_character
        return self

    def is_profane(self, s: str, *args: DetectorOption) -> bool:
        """Return True if ``s`` contains a profanity."""
        return self.scan_profanity(s, *args).has_profane_match()

    def scan_profanity(self, s: str, *args: DetectorOption) -> Matches:
        """Scan ``s`` up to and including the first profanity."""
        return self._new_scanner(False, args).scan(s)

    def scan_all_profanities(self, s: str, *args: DetectorOption) -> Matches:
        """Scan ``s`` for all profanities."""
        return self._new_scanner(True, args).scan(s)

    def censor(self, s: str, *args: DetectorOption) -> Tuple[str, Matches]:
        """Replace every profanity's non-space characters with the censor character."""
        scanner = self._new_scanner(True, args)
        matches = scanner.scan(s)
        if not matches:
            return s, matches

        content = list(scanner.input_orig)
        censor_char = scanner.settings.censor_character
        for match in matches.get_profane_matches():
            for i in range(match.start, match.end):
                if content[i] != " ":
                    content[i] = censor_char
        return "".join(content), matches

    def _new_scanner(
        self, find_all_matches: bool, options: Iterable[DetectorOption]
    ) -> Scanner:
        settings = dataclasses.replace(self.settings, find_all_matches=find_all_matches)
        for option in options:
            option(settings)
        return Scanner(
            settings,
            self.tree,
            special_characters=self.special_characters,
            leet_speak_characters=self.leet_speak_characters,
            wildcard_characters=self.wildcard_characters,
        )