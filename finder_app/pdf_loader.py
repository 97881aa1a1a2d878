from __future__ import annotations

from typing import List
import pdfplumber


def load_pdf_pages(path: str) -> List[str]:
    """Return the extracted text of each page, in page order (empty string for blank pages)."""
    pages: List[str] = []
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    return pages


def load_pdf_lines(path: str) -> List[str]:
    """Flatten all pages into one list of text lines."""
    lines: List[str] = []
    for page_text in load_pdf_pages(path):
        lines.extend(page_text.splitlines())
    return lines
