from enum import Enum
from pathlib import PurePath

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentFormat(Enum):
    """Closed set of upload formats the service can extract text from."""

    PLAIN = ("text/plain", (".txt",))
    DOCX = (DOCX_CONTENT_TYPE, (".docx",))
    PDF = ("application/pdf", (".pdf",))

    def __init__(self, content_type: str, extensions: tuple[str, ...]) -> None:
        self.content_type = content_type
        self.extensions = extensions

    @classmethod
    def from_extension(cls, file_name: str) -> "DocumentFormat | None":
        suffix = PurePath(file_name).suffix.lower()
        for fmt in cls:
            if suffix in fmt.extensions:
                return fmt
        return None

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "DocumentFormat | None":
        if not content_type:
            return None
        mime = content_type.split(";", 1)[0].strip().lower()
        for fmt in cls:
            if fmt.content_type == mime:
                return fmt
        return None

    @classmethod
    def detect(cls, file_name: str, content_type: str | None = None) -> "DocumentFormat | None":
        """Resolve the format from the file extension, falling back to the MIME type."""
        return cls.from_extension(file_name) or cls.from_content_type(content_type)
