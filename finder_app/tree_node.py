from __future__ import annotations

from typing import List, Optional
from .interfaces import Occurrence


class TreeNode:
    """A word-index node: one normalized word and every occurrence of it, in read order."""

    def __init__(self, word: str):
        self.word = word
        self.occurrences: List[Occurrence] = []
        self.height = 1
        self.left: Optional[TreeNode] = None
        self.right: Optional[TreeNode] = None

    def add_occurrence(self, occurrence: Occurrence) -> None:
        self.occurrences.append(occurrence)

    def find_exact_occurrence(self, original_word: str) -> Optional[Occurrence]:
        # Case and punctuation sensitive, unlike the node key
        for occ in self.occurrences:
            if occ.original_word == original_word:
                return occ
        return None

    def __repr__(self) -> str:
        return f"TreeNode(word={self.word!r}, occurrences={len(self.occurrences)}, height={self.height})"
