from typing import ClassVar


class WorkflowError(Exception):
    """Base exception for every failure that aborts an upload.

    Subclasses set the HTTP status and the message shown to the caller.
    The exception text itself is kept for logs only.
    """

    status_code: ClassVar[int] = 500
    public_message: ClassVar[str] = "An error occurred during the process."

    def __init__(self, message: str = "", *, stage: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.stage = stage

    def client_message(self) -> str:
        """Message safe to return to the HTTP caller."""
        return self.public_message
