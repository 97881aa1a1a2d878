from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import SETTINGS
from .errors import DocumentReadError
from .interfaces import SearchResult
from .library import collect_documents, sort_results
from .readers import reader_for
from .word_index import WordIndex

logger = logging.getLogger(__name__)


class DocumentFinder:
    """Owns a word index built from every supported document in a library folder."""

    def __init__(self, library_dir: str | Path | None = None, index: WordIndex | None = None):
        self.library_dir = Path(library_dir or SETTINGS.library_dir)
        self.index = index if index is not None else WordIndex()
        self.documents: List[Path] = []
        self.failed: List[Path] = []

    def load_library(self, show_progress: bool = True) -> int:
        """Rebuild the index from scratch; returns the number of occurrences indexed."""
        self.index.clear()
        self.documents = []
        self.failed = []
        total = 0
        paths = collect_documents(self.library_dir)
        with tqdm(total=len(paths), desc="Indexing", unit="doc", disable=not show_progress) as pbar:
            for path in paths:
                pbar.set_postfix_str(path.name)
                reader = reader_for(path)
                if reader is None:
                    pbar.update(1)
                    continue
                try:
                    total += reader.read(str(path), self.index)
                    self.documents.append(path)
                except DocumentReadError as e:
                    logger.warning("Skipping %s: %s", path, e.reason)
                    self.failed.append(path)
                pbar.update(1)
        logger.info(
            "Indexed %d document(s), %d word(s), %d occurrence(s)",
            len(self.documents), len(self.index), total,
        )
        return total

    def refresh(self) -> int:
        return self.load_library()

    def search(self, query: str, sort_by: Optional[str] = None) -> List[SearchResult]:
        results = self.index.search_results(query)
        return sort_results(results, by=sort_by or SETTINGS.sort_by)
