from __future__ import annotations

from dataclasses import dataclass
import os
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Library
    library_dir: str = os.getenv("FINDER_LIBRARY_DIR", "biblioteca")

    # Snippets
    context_words: int = int(os.getenv("FINDER_CONTEXT_WORDS", "20"))
    marker: str = os.getenv("FINDER_MARKER", "###")

    # Presentation
    sort_by: str = os.getenv("FINDER_SORT_BY", "name")  # name | date | size | position
    log_level: str = os.getenv("FINDER_LOG_LEVEL", "INFO")


SETTINGS = Settings()
