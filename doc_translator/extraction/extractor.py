from collections.abc import Mapping

from doc_translator.extraction.base import BaseFormatExtractor
from doc_translator.extraction.cleanup import CLEANERS
from doc_translator.extraction.exceptions import EmptyDocumentError
from doc_translator.extraction.formats import DocumentFormat
from doc_translator.extraction.models import ExtractedDocument
from doc_translator.logging.logger import Log


class TextExtractor:
    """Dispatches extraction to the adapter registered for each DocumentFormat."""

    def __init__(self, adapters: Mapping[DocumentFormat, BaseFormatExtractor]) -> None:
        missing = [fmt.name for fmt in DocumentFormat if fmt not in adapters]
        if missing:
            raise ValueError(f"No extractor registered for formats: {missing}")
        self._adapters = dict(adapters)

    def extract(self, data: bytes, fmt: DocumentFormat) -> ExtractedDocument:
        """Extract and clean text for the given format.

        Raises:
            ExtractionError: if the adapter cannot parse the content.
            EmptyDocumentError: if nothing readable remains after cleanup.
        """
        if not data:
            raise EmptyDocumentError(f"{fmt.name} upload is zero bytes")
        raw = self._adapters[fmt].extract(data)
        text = CLEANERS[fmt](raw)
        if not text.strip():
            raise EmptyDocumentError(
                f"{fmt.name} content yielded no extractable text (scanned or encrypted?)"
            )
        Log.debug(f"Extracted {len(text)} chars from {fmt.name} content")
        return ExtractedDocument(text=text, source_format=fmt)
