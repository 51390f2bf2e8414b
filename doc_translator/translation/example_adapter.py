"""Example translation adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseTranslator and register the provider in TranslatorFactory.
"""

from doc_translator.translation.base import BaseTranslator
from doc_translator.translation.models import TranslationResult


class ExampleTranslateAdapter(BaseTranslator):
    """Example adapter that tags the text with the target language.

    No network calls. Useful for local development and tests.
    """

    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        return TranslationResult(
            translated_text=f"[{target_lang}] {text}",
            source_lang=source_lang,
            target_lang=target_lang,
        )
