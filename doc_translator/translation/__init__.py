from doc_translator.translation.base import BaseTranslator
from doc_translator.translation.factory import TranslatorFactory
from doc_translator.translation.models import TranslationResult

__all__ = ["BaseTranslator", "TranslationResult", "TranslatorFactory"]
