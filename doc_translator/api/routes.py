from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from doc_translator.api.schemas import ErrorResponse, HealthResponse, UploadResponse
from doc_translator.config.settings import Settings
from doc_translator.workflow.models import UploadRequest
from doc_translator.workflow.workflow import UploadWorkflow

router = APIRouter()

SUCCESS_MESSAGE = "Translation successful!"


def get_workflow(request: Request) -> UploadWorkflow:
    return request.app.state.workflow


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.post(
    "/upload-and-translate",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def upload_and_translate(
    file: UploadFile | None = File(None),
    source_lang: str | None = Form(None, alias="sourceLang"),
    target_lang: str | None = Form(None, alias="targetLang"),
    workflow: UploadWorkflow = Depends(get_workflow),
    settings: Settings = Depends(get_settings),
) -> UploadResponse:
    """Store the uploaded document, translate its text, and overwrite it with the translation.

    Runs in FastAPI's thread pool; the workflow blocks on storage and translation calls.
    """
    file_bytes: bytes | None = None
    file_name = ""
    content_type = None
    if file is not None:
        # One byte past the limit is enough to reject oversized uploads.
        file_bytes = file.file.read(settings.max_upload_bytes + 1)
        file_name = file.filename or ""
        content_type = file.content_type

    stored = workflow.process_upload(
        UploadRequest(
            file_bytes=file_bytes,
            file_name=file_name,
            source_lang=source_lang,
            target_lang=target_lang,
            content_type=content_type,
        )
    )
    return UploadResponse(message=SUCCESS_MESSAGE, fileUrl=stored.url)
