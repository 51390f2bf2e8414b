from doc_translator.config.settings import Settings
from doc_translator.translation.aws_adapter import AwsTranslateAdapter
from doc_translator.translation.base import BaseTranslator
from doc_translator.translation.example_adapter import ExampleTranslateAdapter
from doc_translator.translation.openai_adapter import OpenAITranslateAdapter


class TranslatorFactory:
    """Creates the configured translation adapter."""

    PROVIDERS = ("aws", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseTranslator:
        provider = settings.translation_provider.lower()
        if provider == "aws":
            return AwsTranslateAdapter(
                region=settings.aws_region,
                access_key_id=settings.aws_access_key_id,
                secret_access_key=settings.aws_secret_access_key,
            )
        if provider == "openai":
            return OpenAITranslateAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=settings.openai_base_url.strip() or None,
            )
        if provider == "example":
            return ExampleTranslateAdapter()
        raise ValueError(
            f"Unknown translation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
