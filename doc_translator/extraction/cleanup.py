"""Format-specific cleanup applied to raw extracted text."""

import re
from collections.abc import Callable

from doc_translator.extraction.formats import DocumentFormat

BULLET = "•"

_INLINE_BULLET = re.compile(rf"(?<=[^\n]){BULLET}")
_HYPHENATED_BREAK = re.compile(r"(?<=\w)-[ \t]*\r?\n[ \t]*(?=\w)")
_LEADING_LINE_SPACE = re.compile(r"(?<=\n)[ \t]+")


def clean_plain_text(text: str) -> str:
    return text


def clean_docx_text(text: str) -> str:
    """Start every bullet glyph on its own line and trim the result."""
    return _INLINE_BULLET.sub(f"\n{BULLET}", text).strip()


def clean_pdf_text(text: str) -> str:
    """Rejoin words hyphenated across line breaks and drop line indentation."""
    text = _HYPHENATED_BREAK.sub("", text)
    text = _LEADING_LINE_SPACE.sub("", text)
    return text.strip()


CLEANERS: dict[DocumentFormat, Callable[[str], str]] = {
    DocumentFormat.PLAIN: clean_plain_text,
    DocumentFormat.DOCX: clean_docx_text,
    DocumentFormat.PDF: clean_pdf_text,
}
