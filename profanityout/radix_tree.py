"""Character tree holding the dictionary words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from profanityout.match import WordType


@dataclass
class Node:
    """One character step in the tree; ``word_type`` is set where a word ends."""

    children: Dict[str, "Node"] = field(default_factory=dict)
    word: str = ""
    word_type: WordType = WordType.NONE

    def next(self, ch: str) -> Optional["Node"]:
        """Return the child reached by ``ch``, or None."""
        return self.children.get(ch)


class Tree:
    """Tree of dictionary words keyed by character."""

    def __init__(self) -> None:
        self.root = Node()

    def add(self, word: str, word_type: WordType) -> None:
        """Insert ``word``; a node keeps the highest word type given to it."""
        if not word:
            return
        current = self.root
        for ch in word:
            current = current.children.setdefault(ch, Node())
        current.word = word
        if current.word_type < word_type:
            current.word_type = word_type