from doc_translator.config.settings import Settings
from doc_translator.extraction.base import BaseFormatExtractor
from doc_translator.extraction.docx_adapter import MammothDocxAdapter
from doc_translator.extraction.extractor import TextExtractor
from doc_translator.extraction.formats import DocumentFormat
from doc_translator.extraction.pdfplumber_adapter import PdfPlumberAdapter
from doc_translator.extraction.plain_adapter import PlainTextAdapter
from doc_translator.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Builds a TextExtractor with one adapter per DocumentFormat.

    PLAIN and DOCX have a single implementation each; the PDF adapter is
    picked by ``settings.pdf_engine``.
    """

    PDF_ENGINES: dict[str, type[BaseFormatExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            {
                DocumentFormat.PLAIN: PlainTextAdapter(),
                DocumentFormat.DOCX: MammothDocxAdapter(),
                DocumentFormat.PDF: cls.pdf_adapter(settings.pdf_engine),
            }
        )

    @classmethod
    def pdf_adapter(cls, engine: str) -> BaseFormatExtractor:
        adapter_cls = cls.PDF_ENGINES.get(engine.strip().lower())
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
