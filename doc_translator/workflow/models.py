from dataclasses import dataclass, field
from pathlib import Path

from doc_translator.extraction.formats import DocumentFormat
from doc_translator.extraction.models import ExtractedDocument
from doc_translator.storage.models import StoredObject
from doc_translator.translation.models import TranslationResult


@dataclass(frozen=True)
class UploadRequest:
    """Inbound upload as received from the transport layer."""

    file_bytes: bytes | None
    file_name: str
    source_lang: str | None
    target_lang: str | None
    content_type: str | None = None

    @property
    def declared_format(self) -> DocumentFormat | None:
        return DocumentFormat.detect(self.file_name, self.content_type)

    @property
    def object_key(self) -> str:
        """Storage key: the base name of the uploaded file."""
        return self.file_name.replace("\\", "/").rsplit("/", 1)[-1]


@dataclass(slots=True)
class WorkflowContext:
    """Accumulates data as the upload moves through workflow steps."""

    request: UploadRequest
    stage: str = ""
    document_format: DocumentFormat | None = None
    object_key: str = ""
    upload_path: Path | None = None
    working_path: Path | None = None
    temp_paths: list[Path] = field(default_factory=list)
    extracted: ExtractedDocument | None = None
    translation: TranslationResult | None = None
    stored_object: StoredObject | None = None
