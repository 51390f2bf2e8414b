import io

import pdfplumber

from doc_translator.extraction.base import BaseFormatExtractor
from doc_translator.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseFormatExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages)
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
