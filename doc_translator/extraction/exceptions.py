from doc_translator.exceptions import WorkflowError


class ExtractionError(WorkflowError):
    """Raised when a document cannot be parsed."""

    public_message = "Failed to extract text. Ensure the file is not encrypted or scanned."


class EmptyDocumentError(WorkflowError):
    """Raised when parsing succeeds but yields no readable text."""

    public_message = "The file contains no extractable text (scanned or encrypted)."
