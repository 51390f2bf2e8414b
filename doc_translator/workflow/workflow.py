from collections.abc import Sequence
from pathlib import Path

from doc_translator.config.settings import Settings
from doc_translator.exceptions import WorkflowError
from doc_translator.extraction.extractor import TextExtractor
from doc_translator.extraction.factory import TextExtractorFactory
from doc_translator.logging.logger import Log
from doc_translator.storage.base import BaseBlobStore
from doc_translator.storage.factory import BlobStoreFactory
from doc_translator.storage.models import StoredObject
from doc_translator.translation.base import BaseTranslator
from doc_translator.translation.factory import TranslatorFactory
from doc_translator.workflow.exceptions import CleanupError
from doc_translator.workflow.models import UploadRequest, WorkflowContext
from doc_translator.workflow.pipeline import WorkflowStep
from doc_translator.workflow.steps import (
    DownloadOriginalStep,
    ExtractTextStep,
    MaterializeUploadStep,
    PersistOriginalStep,
    PersistTranslationStep,
    TranslateStep,
    ValidateRequestStep,
)


class UploadWorkflow:
    """Orchestrates upload -> extract -> translate -> overwrite for one file.

    Steps run strictly in order and the first failure aborts the run. Nothing
    is retried. Temporary files registered on the context are removed on every
    exit path.
    """

    def __init__(self, steps: Sequence[WorkflowStep]) -> None:
        self._steps = list(steps)

    def process_upload(self, request: UploadRequest) -> StoredObject:
        """Run every step for the request and return the stored translation.

        Raises:
            WorkflowError: subclass describing the failed stage.
        """
        context = WorkflowContext(request=request)
        Log.info(f"Processing upload '{request.file_name}'")
        succeeded = False
        try:
            for step in self._steps:
                context.stage = step.name
                context = step.run(context)
            succeeded = True
        except WorkflowError as exc:
            exc.stage = exc.stage or context.stage
            Log.error(
                f"Upload failed: {type(exc).__name__}: {exc}",
                file_name=request.file_name,
                stage=context.stage,
            )
            raise
        except Exception as exc:
            Log.exception(
                "Upload failed unexpectedly",
                file_name=request.file_name,
                stage=context.stage,
            )
            raise WorkflowError(str(exc), stage=context.stage) from exc
        finally:
            self._release_temp_files(context, strict=succeeded)

        if context.stored_object is None:
            raise WorkflowError("Workflow finished without storing a result", stage=context.stage)
        Log.info(f"Upload '{request.file_name}' translated: {context.stored_object.url}")
        return context.stored_object

    def _release_temp_files(self, context: WorkflowContext, *, strict: bool) -> None:
        failures: list[str] = []
        for path in context.temp_paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                failures.append(f"{path}: {exc}")
        context.temp_paths.clear()
        if not failures:
            return
        message = f"Failed to remove temporary files: {'; '.join(failures)}"
        Log.error(message)
        if strict:
            raise CleanupError(message, stage="cleanup")


def build_workflow(
    settings: Settings,
    *,
    blob_store: BaseBlobStore | None = None,
    translator: BaseTranslator | None = None,
    text_extractor: TextExtractor | None = None,
) -> UploadWorkflow:
    """Build an UploadWorkflow with all required adapters."""
    if blob_store is None:
        blob_store = BlobStoreFactory.create(settings)
    if translator is None:
        translator = TranslatorFactory.create(settings)
    if text_extractor is None:
        text_extractor = TextExtractorFactory.create(settings)
    tmp_dir = Path(settings.upload_tmp_dir)

    steps: list[WorkflowStep] = [
        ValidateRequestStep(settings.max_upload_bytes),
        MaterializeUploadStep(tmp_dir),
        PersistOriginalStep(blob_store),
    ]
    if settings.download_before_extract:
        steps.append(DownloadOriginalStep(blob_store, tmp_dir))
    steps += [
        ExtractTextStep(text_extractor),
        TranslateStep(translator),
        PersistTranslationStep(blob_store),
    ]
    return UploadWorkflow(steps)
