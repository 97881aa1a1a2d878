from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from .interfaces import SearchResult
from .readers import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

SORT_KEYS = ("name", "date", "size", "position")


def collect_documents(directory: str | Path) -> List[Path]:
    """Recursively list supported documents under `directory`, sorted by path."""
    root = Path(directory)
    if not root.is_dir():
        logger.warning("Library directory %s does not exist", root)
        return []
    return sorted(
        p for p in root.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
    )


def _stat(path: str) -> Tuple[float, int]:
    try:
        st = os.stat(path)
    except OSError:
        return 0.0, 0
    return st.st_mtime, st.st_size


def _primary_key(by: str) -> Callable[[SearchResult], object]:
    cache: Dict[str, Tuple[float, int]] = {}

    def stat(r: SearchResult) -> Tuple[float, int]:
        if r.document not in cache:
            cache[r.document] = _stat(r.document)
        return cache[r.document]

    if by == "name":
        return lambda r: Path(r.document).name.lower()
    if by == "date":
        return lambda r: stat(r)[0]
    return lambda r: stat(r)[1]


def sort_results(results: Sequence[SearchResult], by: str = "name", descending: bool = True) -> List[SearchResult]:
    """Order results by file name, modification date or file size.

    Results of the same document always stay in reading order. `by="position"` keeps the
    documents grouped by path and ignores `descending`.
    """
    if by not in SORT_KEYS:
        raise ValueError(f"Unknown sort key {by!r}; expected one of {', '.join(SORT_KEYS)}")
    ordered = sorted(results, key=lambda r: (r.document, r.position))
    if by == "position":
        return ordered
    # sorted() is stable, so reading order survives within equal keys
    return sorted(ordered, key=_primary_key(by), reverse=descending)
