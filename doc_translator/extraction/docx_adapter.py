import io

import mammoth

from doc_translator.extraction.base import BaseFormatExtractor
from doc_translator.extraction.exceptions import ExtractionError


class MammothDocxAdapter(BaseFormatExtractor):
    """Extracts raw text from DOCX using mammoth."""

    def extract(self, data: bytes) -> str:
        try:
            result = mammoth.extract_raw_text(io.BytesIO(data))
        except Exception as exc:
            raise ExtractionError(f"mammoth extraction failed: {exc}") from exc
        return result.value or ""
