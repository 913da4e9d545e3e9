"""Match results produced by a profanity scan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from profanityout.settings import DetectorSettings


class WordType(IntEnum):
    """Kind of dictionary word; the ordering matters: suspect < profanity < false positive."""

    NONE = 0
    SUSPECT = 10
    PROFANITY = 20
    FALSE_POSITIVE = 30


@dataclass
class Match:
    """A dictionary word found in the scanned text."""

    word: str = ""
    word_type: WordType = WordType.NONE
    start: int = 0
    end: int = 0
    leading_space: bool = False
    trailing_space: bool = False
    text: str = ""
    settings: Optional["DetectorSettings"] = field(
        default=None, compare=False, repr=False
    )

    def is_profane(self) -> bool:
        return self.word_type == WordType.PROFANITY

    def is_suspect(self) -> bool:
        return self.word_type == WordType.SUSPECT

    def is_false_positive(self) -> bool:
        return self.word_type == WordType.FALSE_POSITIVE


class Matches(list):
    """A list of matches with helpers to filter them by word type."""

    def has_profane_match(self) -> bool:
        return any(m.is_profane() for m in self)

    def get_profane_matches(self) -> "Matches":
        return Matches(m for m in self if m.is_profane())

    def get_first_profane_match(self) -> Optional[Match]:
        return next((m for m in self if m.is_profane()), None)

    def has_suspect_match(self) -> bool:
        return any(m.is_suspect() for m in self)

    def get_suspect_matches(self) -> "Matches":
        return Matches(m for m in self if m.is_suspect())

    def has_false_positive_match(self) -> bool:
        return any(m.is_false_positive() for m in self)

    def get_false_positive_matches(self) -> "Matches":
        return Matches(m for m in self if m.is_false_positive())