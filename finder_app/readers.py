from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from .chain import OccurrenceChain
from .errors import DocumentReadError
from .interfaces import IDocumentReader
from .pdf_loader import load_pdf_lines
from .word_index import WordIndex

logger = logging.getLogger(__name__)


def _ingest_lines(index: WordIndex, document: str, lines: Iterable[str]) -> int:
    chain = OccurrenceChain(index, document)
    for line_number, line in enumerate(lines, start=1):
        chain.add_line(line, line_number)
    return chain.count


class TextFileReader(IDocumentReader):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: str, index: WordIndex) -> int:
        try:
            with open(path, "r", encoding=self.encoding, errors="replace") as f:
                return _ingest_lines(index, path, f)
        except OSError as e:
            logger.error("Error reading text file %s: %s", path, e)
            raise DocumentReadError(path, str(e)) from e


class PdfFileReader(IDocumentReader):
    """Lines are numbered continuously across pages; the chain spans the whole file."""

    def read(self, path: str, index: WordIndex) -> int:
        try:
            lines = load_pdf_lines(path)
        except Exception as e:  # noqa: BLE001 - pdfminer raises a zoo of exception types
            logger.error("Error reading PDF %s: %s", path, e)
            raise DocumentReadError(path, str(e)) from e
        return _ingest_lines(index, path, lines)


class DocxFileReader(IDocumentReader):
    """One paragraph counts as one line."""

    def read(self, path: str, index: WordIndex) -> int:
        import docx  # python-docx

        try:
            document = docx.Document(path)
        except Exception as e:  # noqa: BLE001 - invalid zip/xml surfaces as several types
            logger.error("Error reading DOCX %s: %s", path, e)
            raise DocumentReadError(path, str(e)) from e
        return _ingest_lines(index, path, (p.text for p in document.paragraphs))


READERS: Dict[str, IDocumentReader] = {
    ".txt": TextFileReader(),
    ".pdf": PdfFileReader(),
    ".docx": DocxFileReader(),
}

SUPPORTED_EXTENSIONS = tuple(READERS)


def reader_for(path: str | Path) -> Optional[IDocumentReader]:
    return READERS.get(Path(path).suffix.lower())
