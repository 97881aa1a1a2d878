from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .config import SETTINGS
from .interfaces import Occurrence, SearchResult
from .normalizer import normalize
from .tree_node import TreeNode

logger = logging.getLogger(__name__)


def _height(node: Optional[TreeNode]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: TreeNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: TreeNode) -> TreeNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: TreeNode) -> TreeNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


class WordIndex:
    """AVL tree of normalized words with phrase lookup over the reading-order chain.

    Nodes are keyed by normalized word; each node keeps the occurrences of its word in the
    order they were inserted. Phrase queries find the first word's node and then follow
    `Occurrence.next` links, so the source text never has to be re-read.

    Not thread-safe: ingest fully, then query.
    """

    def __init__(self, context_words: int | None = None, marker: str | None = None):
        self.root: Optional[TreeNode] = None
        self.context_words = SETTINGS.context_words if context_words is None else context_words
        self.marker = marker or SETTINGS.marker

    # --- Insertion ---
    def insert(self, word: str, occurrence: Occurrence) -> None:
        """Add `occurrence` under `word`, which must already be normalized."""
        self.root = self._insert(self.root, word, occurrence)

    def _insert(self, node: Optional[TreeNode], word: str, occurrence: Occurrence) -> TreeNode:
        if node is None:
            new_node = TreeNode(word)
            new_node.add_occurrence(occurrence)
            return new_node

        if word < node.word:
            node.left = self._insert(node.left, word, occurrence)
        elif word > node.word:
            node.right = self._insert(node.right, word, occurrence)
        else:
            node.add_occurrence(occurrence)
            return node

        _update_height(node)
        balance = _balance(node)

        # The inserted key's side of the child tells which grandchild grew
        if balance > 1:
            if word > node.left.word:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if word < node.right.word:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def clear(self) -> None:
        self.root = None

    # --- Lookup ---
    def search(self, word: str) -> Optional[TreeNode]:
        key = normalize(word.strip())
        if not key:
            return None
        node = self.root
        while node is not None:
            if key == node.word:
                return node
            node = node.left if key < node.word else node.right
        return None

    def search_all_occurrences(self, text: str) -> List[Occurrence]:
        """Return the occurrences of a word, or the first occurrence of each phrase match.

        A phrase matches only when its words follow each other directly in reading order.
        """
        words = normalize(text).split()
        if not words:
            return []

        node = self.search(words[0])
        if node is None:
            return []
        if len(words) == 1:
            return list(node.occurrences)

        matches: List[Occurrence] = []
        for occ in node.occurrences:
            current: Optional[Occurrence] = occ
            for expected in words[1:]:
                current = current.next
                if current is None or normalize(current.original_word) != expected:
                    break
            else:
                matches.append(occ)
        return matches

    def context_snippet(self, occurrence: Occurrence, length: int) -> str:
        """Build the excerpt around a match, with the matched words between markers.

        Walks back at most `context_words` words, stopping before a word containing a
        period, and forward at most `context_words` words, stopping after one.
        """
        before: List[str] = []
        current = occurrence
        while current.previous is not None and len(before) < self.context_words:
            if "." in current.previous.original_word:
                break
            current = current.previous
            before.append(current.original_word)
        before.reverse()

        matched: List[str] = []
        last = occurrence
        current = occurrence
        while current is not None and len(matched) < max(length, 1):
            matched.append(current.original_word)
            last = current
            current = current.next

        after: List[str] = []
        current = last.next
        while current is not None and len(after) < self.context_words:
            after.append(current.original_word)
            if "." in current.original_word:
                break
            current = current.next

        parts = before + [self.marker] + matched + [self.marker] + after
        return " ".join(parts).strip()

    def search_results(self, text: str) -> List[SearchResult]:
        length = len(normalize(text).split())
        results = [
            SearchResult(
                document=occ.document,
                position=occ.position,
                line=occ.line,
                line_position=occ.line_position,
                snippet=self.context_snippet(occ, length),
            )
            for occ in self.search_all_occurrences(text)
        ]
        logger.debug("query %r -> %d result(s)", text, len(results))
        return results

    def search_string(self, text: str) -> List[str]:
        return [r.to_legacy_string() for r in self.search_results(text)]

    # --- Introspection ---
    def nodes(self) -> Iterator[TreeNode]:
        """In-order traversal, i.e. nodes sorted by word."""
        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def words(self) -> Iterator[str]:
        for node in self.nodes():
            yield node.word

    def occurrence_count(self) -> int:
        return sum(len(n.occurrences) for n in self.nodes())

    @property
    def height(self) -> int:
        return _height(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word) is not None
