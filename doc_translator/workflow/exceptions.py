from doc_translator.exceptions import WorkflowError


class InvalidRequestError(WorkflowError):
    """Raised when the upload is missing fields, oversized, or of an unknown format."""

    status_code = 400
    public_message = "Invalid upload request."

    def client_message(self) -> str:
        return str(self)


class CleanupError(WorkflowError):
    """Raised when a temporary file cannot be removed after a successful run."""
