from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .word_index import WordIndex


LEGACY_SEPARATOR = ": "


@dataclass(eq=False)
class Occurrence:
    """One appearance of a word in a document.

    `previous`/`next` thread occurrences in the order they were read, independently of the
    tree. They are assigned once by the ingestion side and only followed afterwards.
    """

    document: str
    original_word: str
    position: int  # 1-based within the document
    line: Optional[int] = None
    line_position: Optional[int] = None
    previous: Optional["Occurrence"] = field(default=None, repr=False)
    next: Optional["Occurrence"] = field(default=None, repr=False)


def link(prev: Occurrence, nxt: Occurrence) -> None:
    prev.next = nxt
    nxt.previous = prev


@dataclass(frozen=True)
class SearchResult:
    document: str
    position: int
    line: Optional[int]
    line_position: Optional[int]
    snippet: str

    def to_legacy_string(self) -> str:
        """Encode in the colon-delimited layout older consumers split on ': '."""
        line = "" if self.line is None else self.line
        line_position = "" if self.line_position is None else self.line_position
        return LEGACY_SEPARATOR.join([
            self.document,
            f"Pocición general:{self.position}",
            f"Linea:{line}",
            f"Pocición en linea:{line_position}",
            self.snippet,
        ])


class IDocumentReader(Protocol):
    def read(self, path: str, index: "WordIndex") -> int:
        """Stream every token of `path` into `index`.

        Returns:
            The number of occurrences inserted.
        """
        ...
