"""Detector settings and option functions that adjust them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from profanityout.match import Match

ConfidenceCalculator = Callable[["Match"], bool]


def default_confidence_calculator(match: "Match") -> bool:
    """Accept every match."""
    return True


@dataclass
class DetectorSettings:
    """Options controlling how input is sanitized and matched."""

    sanitize_special_characters: bool = True
    sanitize_leet_speak: bool = True
    sanitize_accents: bool = True
    sanitize_spaces: bool = True
    sanitize_repeated_characters: bool = True
    sanitize_wildcard_characters: bool = False
    process_input_as_html: bool = False
    match_whole_word: bool = False
    confidence_calculator: ConfidenceCalculator = default_confidence_calculator
    censor_character: str = "*"
    find_all_matches: bool = False


DetectorOption = Callable[[DetectorSettings], None]


def _setter(name: str, value) -> DetectorOption:
    def apply(settings: DetectorSettings) -> None:
        setattr(settings, name, value)

    return apply


def with_sanitize_special_characters(flag: bool) -> DetectorOption:
    return _setter("sanitize_special_characters", flag)


def with_sanitize_leet_speak(flag: bool) -> DetectorOption:
    return _setter("sanitize_leet_speak", flag)


def with_sanitize_accents(flag: bool) -> DetectorOption:
    return _setter("sanitize_accents", flag)


def with_sanitize_repeated_characters(flag: bool) -> DetectorOption:
    return _setter("sanitize_repeated_characters", flag)


def with_sanitize_wildcard_characters(flag: bool) -> DetectorOption:
    return _setter("sanitize_wildcard_characters", flag)


def with_process_input_as_html(flag: bool) -> DetectorOption:
    return _setter("process_input_as_html", flag)


def with_match_whole_word(flag: bool) -> DetectorOption:
    return _setter("match_whole_word", flag)


def with_confidence_calculator(fn: ConfidenceCalculator) -> DetectorOption:
    return _setter("confidence_calculator", fn)


def with_censor_character(ch: str) -> DetectorOption:
    return _setter("censor_character", ch)