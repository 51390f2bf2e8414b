from abc import ABC, abstractmethod

from doc_translator.translation.models import TranslationResult


class BaseTranslator(ABC):
    """Contract for all machine translation adapters."""

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """Translate text between two language codes.

        The caller guarantees non-empty text and both language codes. Nothing is
        split into chunks: provider size limits surface as TranslationError.

        Raises:
            TranslationError: on any provider failure.
        """
