from doc_translator.extraction.base import BaseFormatExtractor
from doc_translator.extraction.exceptions import ExtractionError


class PlainTextAdapter(BaseFormatExtractor):
    """Decodes plain text files as UTF-8."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"File is not valid UTF-8 text: {exc}") from exc
