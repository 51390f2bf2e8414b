from doc_translator.exceptions import WorkflowError


class TranslationError(WorkflowError):
    """Raised when the translation provider call fails."""

    public_message = "Failed to translate the document."


class TranslationNetworkError(TranslationError):
    """Raised when the provider call fails due to network/infrastructure issues."""
