from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from doc_translator.exceptions import WorkflowError

GENERIC_ERROR = "An error occurred during the process."


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WorkflowError)
    async def workflow_exception_handler(
        request: Request, exc: WorkflowError
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.client_message()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail) if exc.detail else "HTTP error"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content=error_body("Malformed upload form"))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=500, content=error_body(GENERIC_ERROR))
