from abc import ABC, abstractmethod


class BaseFormatExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract raw text from file bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text before format-specific cleanup.

        Raises:
            ExtractionError: if the content cannot be parsed.
        """
