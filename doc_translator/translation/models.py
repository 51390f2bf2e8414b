from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationResult:
    """Output of a translation call. Empty translated_text is passed through as-is."""

    translated_text: str
    source_lang: str = ""
    target_lang: str = ""
