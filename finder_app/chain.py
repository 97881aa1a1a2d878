from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from .interfaces import Occurrence, link
from .normalizer import normalize, tokenize

if TYPE_CHECKING:
    from .word_index import WordIndex


class OccurrenceChain:
    """Feeds one document's tokens into a word index in reading order.

    Positions start at 1 and every new occurrence is linked after the previous one. Use a
    fresh chain per document so phrase matches cannot run from one file into the next.
    """

    def __init__(self, index: "WordIndex", document: str):
        self.index = index
        self.document = document
        self.count = 0
        self.last: Optional[Occurrence] = None

    def add(self, token: str, line: int | None = None, line_position: int | None = None) -> Occurrence:
        self.count += 1
        occ = Occurrence(
            document=self.document,
            original_word=token,
            position=self.count,
            line=line,
            line_position=line_position,
        )
        self.index.insert(normalize(token), occ)
        if self.last is not None:
            link(self.last, occ)
        self.last = occ
        return occ

    def add_line(self, text: str, line_number: int | None = None) -> int:
        """Add every whitespace-separated token of one line; returns how many were added."""
        tokens = tokenize(text)
        for i, token in enumerate(tokens, start=1):
            self.add(token, line=line_number, line_position=i)
        return len(tokens)
