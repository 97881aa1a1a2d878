from __future__ import annotations


class FinderError(Exception):
    """Base class for errors raised outside the word index core."""


class DocumentReadError(FinderError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason
