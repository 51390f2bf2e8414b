from dataclasses import dataclass

from doc_translator.extraction.formats import DocumentFormat


@dataclass(frozen=True)
class ExtractedDocument:
    """Normalized text read from an upload. text is never blank."""

    text: str
    source_format: DocumentFormat
