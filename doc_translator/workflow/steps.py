from pathlib import Path, PurePath

from doc_translator.extraction.extractor import TextExtractor
from doc_translator.logging.logger import Log
from doc_translator.storage.base import BaseBlobStore
from doc_translator.storage.exceptions import StorageError
from doc_translator.storage.models import StoredObject
from doc_translator.translation.base import BaseTranslator
from doc_translator.workflow.exceptions import InvalidRequestError
from doc_translator.workflow.models import WorkflowContext
from doc_translator.workflow.pipeline import WorkflowStep, write_temp_file

TRANSLATED_CONTENT_TYPE = "text/plain; charset=utf-8"


class ValidateRequestStep(WorkflowStep):
    name = "validate"

    def __init__(self, max_upload_bytes: int) -> None:
        self._max_upload_bytes = max_upload_bytes

    def run(self, context: WorkflowContext) -> WorkflowContext:
        request = context.request
        if not (request.source_lang or "").strip() or not (request.target_lang or "").strip():
            raise InvalidRequestError("Missing sourceLang or targetLang in request body")
        if request.file_bytes is None:
            raise InvalidRequestError("No file uploaded or file size exceeds limit")
        if len(request.file_bytes) > self._max_upload_bytes:
            raise InvalidRequestError(
                f"File is {len(request.file_bytes)} bytes, limit is {self._max_upload_bytes}"
            )
        if not request.object_key:
            raise InvalidRequestError("Uploaded file has no name")
        document_format = request.declared_format
        if document_format is None:
            raise InvalidRequestError(
                f"Unsupported file type for '{request.file_name}' "
                f"(content type {request.content_type!r})"
            )
        context.document_format = document_format
        context.object_key = request.object_key
        return context


class MaterializeUploadStep(WorkflowStep):
    name = "materialize"

    def __init__(self, tmp_dir: Path) -> None:
        self._tmp_dir = tmp_dir

    def run(self, context: WorkflowContext) -> WorkflowContext:
        data = context.request.file_bytes or b""
        suffix = PurePath(context.object_key).suffix
        try:
            context.upload_path = write_temp_file(context, self._tmp_dir, data, suffix)
        except OSError as exc:
            raise StorageError(f"Failed to spool upload to {self._tmp_dir}: {exc}") from exc
        context.working_path = context.upload_path
        return context


class PersistOriginalStep(WorkflowStep):
    name = "persist_original"

    def __init__(self, blob_store: BaseBlobStore) -> None:
        self._blob_store = blob_store

    def run(self, context: WorkflowContext) -> WorkflowContext:
        if context.upload_path is None or context.document_format is None:
            raise ValueError("WorkflowContext.upload_path must be set before persisting")
        data = _read_local(context.upload_path)
        self._blob_store.put(context.object_key, data, context.document_format.content_type)
        Log.info("Original stored", bucket=self._blob_store.bucket, key=context.object_key)
        return context


class DownloadOriginalStep(WorkflowStep):
    name = "download_original"

    def __init__(self, blob_store: BaseBlobStore, tmp_dir: Path) -> None:
        self._blob_store = blob_store
        self._tmp_dir = tmp_dir

    def run(self, context: WorkflowContext) -> WorkflowContext:
        data = self._blob_store.get(context.object_key)
        suffix = PurePath(context.object_key).suffix
        try:
            context.working_path = write_temp_file(context, self._tmp_dir, data, suffix)
        except OSError as exc:
            raise StorageError(f"Failed to write downloaded copy: {exc}") from exc
        Log.info(
            f"Downloaded {len(data)} bytes",
            bucket=self._blob_store.bucket,
            key=context.object_key,
        )
        return context


class ExtractTextStep(WorkflowStep):
    name = "extract"

    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: WorkflowContext) -> WorkflowContext:
        if context.working_path is None or context.document_format is None:
            raise ValueError("WorkflowContext.working_path must be set before extraction")
        data = _read_local(context.working_path)
        context.extracted = self._text_extractor.extract(data, context.document_format)
        Log.info(
            f"Extracted {len(context.extracted.text)} chars from {context.object_key} "
            f"({context.document_format.name})"
        )
        return context


class TranslateStep(WorkflowStep):
    name = "translate"

    def __init__(self, translator: BaseTranslator) -> None:
        self._translator = translator

    def run(self, context: WorkflowContext) -> WorkflowContext:
        if context.extracted is None:
            raise ValueError("WorkflowContext.extracted must be set before translation")
        request = context.request
        context.translation = self._translator.translate(
            context.extracted.text,
            (request.source_lang or "").strip(),
            (request.target_lang or "").strip(),
        )
        Log.info(
            f"Translated {context.object_key} {request.source_lang}->{request.target_lang}: "
            f"{len(context.translation.translated_text)} chars"
        )
        return context


class PersistTranslationStep(WorkflowStep):
    name = "persist_translation"

    def __init__(self, blob_store: BaseBlobStore) -> None:
        self._blob_store = blob_store

    def run(self, context: WorkflowContext) -> WorkflowContext:
        if context.translation is None:
            raise ValueError("WorkflowContext.translation must be set before persisting")
        self._blob_store.put(
            context.object_key,
            context.translation.translated_text.encode("utf-8"),
            TRANSLATED_CONTENT_TYPE,
        )
        context.stored_object = StoredObject(
            bucket=self._blob_store.bucket,
            key=context.object_key,
            url=self._blob_store.public_url(context.object_key),
        )
        Log.info("Translation stored", bucket=self._blob_store.bucket, key=context.object_key)
        return context


def _read_local(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise StorageError(f"Failed to read local copy {path}: {exc}") from exc
