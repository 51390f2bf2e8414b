from pydantic import BaseModel


class UploadResponse(BaseModel):
    message: str
    fileUrl: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
