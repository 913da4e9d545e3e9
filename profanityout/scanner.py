"""Scanning of text against the word tree."""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from profanityout.html import decode_html_entity_at, skip_html_tag
from profanityout.match import Match, Matches, WordType
from profanityout.radix_tree import Node, Tree
from profanityout.settings import DetectorSettings
from profanityout.util import normalize_as_nfc, remove_accents

_END = "\0"


def _to_lower(ch: str) -> str:
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


class Scanner:
    """Finds dictionary words in text according to the given settings.

    After :meth:`scan`, ``input_orig`` holds the characters of the original
    text, indexed the same way as match positions.
    """

    def __init__(
        self,
        settings: DetectorSettings,
        tree: Tree,
        special_characters: Optional[Mapping[str, str]] = None,
        leet_speak_characters: Optional[Mapping[str, str]] = None,
        wildcard_characters: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.settings = settings
        self.tree = tree
        self.special_characters = special_characters or {}
        self.leet_speak_characters = leet_speak_characters or {}
        self.wildcard_characters = wildcard_characters or {}
        self.input_orig: list = []
        self._input: list = []

    def scan(self, text: str) -> Matches:
        """Scan ``text`` and return the matches found."""
        settings = self.settings
        if settings.sanitize_accents:
            self.input_orig = list(text)
            self._input = list(remove_accents(text))
        else:
            self.input_orig = list(normalize_as_nfc(text))
            self._input = self.input_orig

        length = len(self._input)
        matches = Matches()
        pos = 0
        while pos < length:
            next_pos = self._skip_whitespaces(pos)
            if next_pos >= length:
                break
            has_leading_space = pos == 0 or next_pos != pos
            pos = next_pos

            match = Match(start=pos, leading_space=has_leading_space, settings=settings)
            self._scan_one(pos, _END, self.tree.root, match)
            if match.word_type != WordType.NONE and settings.confidence_calculator(match):
                matches.append(match)
                if match.word_type == WordType.PROFANITY and not settings.find_all_matches:
                    return matches
                pos = match.end
                continue

            if settings.match_whole_word:
                next_pos = self._skip_until_whitespace(pos)
                if next_pos != pos:
                    pos = next_pos
                    continue
            pos += 1
        return matches

    def _scan_one(self, pos: int, prev_ch: str, current: Node, match: Match) -> None:
        settings = self.settings
        length = len(self._input)
        wildcard_pos = -1
        wildcard_node: Optional[Node] = None

        while pos < length:
            ch, next_pos = self._next_char_at(pos)
            if ch == _END:
                break
            ch = _to_lower(ch)
            next_node = current.next(ch)

            if next_node is None:
                if ch == " " and settings.sanitize_spaces:
                    pos, prev_ch = next_pos, ch
                    continue

                if (
                    settings.sanitize_wildcard_characters
                    and wildcard_pos == -1
                    and ch in self.wildcard_characters
                ):
                    # Remember where a wildcard scan may restart if nothing matches
                    wildcard_pos, wildcard_node = pos, current

                if settings.sanitize_leet_speak and ch in self.leet_speak_characters:
                    leet_ch = self.leet_speak_characters[ch]
                    leet_node = current.next(leet_ch)
                    if leet_node is not None:
                        if leet_node.word_type != WordType.NONE:
                            self._update_match(match, next_pos, leet_node)
                        self._scan_one(next_pos, leet_ch, leet_node, match)
                        if match.word_type == WordType.PROFANITY:
                            break

                if settings.sanitize_special_characters and ch in self.special_characters:
                    ch = self.special_characters[ch]
                    next_node = current.next(ch)
                    if next_node is None and ch == " " and settings.sanitize_spaces:
                        pos, prev_ch = next_pos, ch
                        continue

                if (
                    next_node is None
                    and settings.sanitize_repeated_characters
                    and self._is_char_repeated_at(pos, prev_ch)
                ):
                    pos, prev_ch = next_pos, ch
                    continue

                if next_node is None and settings.sanitize_wildcard_characters:
                    next_node = current.next("*")

                if next_node is None:
                    break

            pos, prev_ch, current = next_pos, ch, next_node
            if current.word_type != WordType.NONE:
                self._update_match(match, next_pos, current)

        if match.word_type == WordType.NONE and wildcard_node is not None:
            for child_ch, child in wildcard_node.children.items():
                if child.word_type != WordType.NONE:
                    self._update_match(match, wildcard_pos + 1, child)
                self._scan_one(wildcard_pos + 1, child_ch, child, match)
                if match.word_type == WordType.PROFANITY:
                    break

    def _is_whitespace_at(self, i: int) -> bool:
        if i < 0:
            return True
        ch, _ = self._next_char_at(i)
        if ch == _END:
            return True
        if self.settings.sanitize_special_characters:
            ch = self.special_characters.get(ch, ch)
        return ch == " "

    def _is_char_repeated_at(self, i: int, prev_ch: str) -> bool:
        if i <= 0:
            return False
        ch, _ = self._next_char_at(i)
        return _to_lower(ch) == prev_ch

    def _skip_whitespaces(self, i: int) -> int:
        settings = self.settings
        while True:
            ch, nxt = self._next_char_at(i)
            if ch == _END:
                return nxt
            if ch == " ":
                i = nxt
                continue
            if settings.sanitize_leet_speak:
                leet = self.leet_speak_characters.get(ch, _END)
                if leet not in (_END, " "):
                    return i
            if settings.sanitize_special_characters:
                ch = self.special_characters.get(ch, ch)
            if ch != " ":
                return i
            i = nxt

    def _skip_until_whitespace(self, i: int) -> int:
        settings = self.settings
        while True:
            ch, nxt = self._next_char_at(i)
            if ch == _END:
                return nxt
            if ch == " ":
                return i
            if settings.sanitize_leet_speak and self.leet_speak_characters.get(ch) == " ":
                return i
            if (
                settings.sanitize_special_characters
                and self.special_characters.get(ch) == " "
            ):
                return i
            i = nxt

    def _next_char_at(self, i: int) -> Tuple[str, int]:
        content = self._input
        while True:
            if i >= len(content):
                return _END, i
            ch = content[i]
            if self.settings.process_input_as_html:
                if ch == "<":
                    nxt = skip_html_tag(content, i)
                    if nxt != i:
                        i = nxt
                        continue
                    return ch, i + 1
                if ch == "&":
                    decoded, nxt = decode_html_entity_at(content, i)
                    if nxt == i or decoded is None:
                        return ch, i + 1
                    return decoded, nxt
            return ch, i + 1

    def _update_match(self, match: Match, end: int, node: Node) -> None:
        # A weaker word type never replaces a stronger one already found
        if match.word_type > node.word_type:
            return
        trailing_space = self._is_whitespace_at(end)
        if self.settings.match_whole_word and (
            not match.leading_space or not trailing_space
        ):
            return
        match.end = end
        match.word_type = node.word_type
        match.word = node.word
        match.trailing_space = trailing_space
        match.text = "".join(self.input_orig[match.start : match.end])