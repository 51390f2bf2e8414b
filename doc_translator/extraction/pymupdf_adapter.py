import pymupdf

from doc_translator.extraction.base import BaseFormatExtractor
from doc_translator.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseFormatExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages)
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
