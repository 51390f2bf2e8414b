from doc_translator.exceptions import WorkflowError


class StorageError(WorkflowError):
    """Raised when the blob store cannot read or write an object."""

    public_message = "Failed to store the file."
