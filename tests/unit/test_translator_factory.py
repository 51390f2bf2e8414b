"""Tests for TranslatorFactory."""

from unittest.mock import patch

import pytest

from doc_translator.config.settings import Settings
from doc_translator.translation import BaseTranslator, TranslatorFactory
from doc_translator.translation.example_adapter import ExampleTranslateAdapter


class TestTranslatorFactory:
    def test_creates_example_adapter(self) -> None:
        translator = TranslatorFactory.create(Settings(translation_provider="example"))
        assert isinstance(translator, ExampleTranslateAdapter)
        assert translator.translate("Hi", "en", "de").translated_text == "[de] Hi"

    def test_creates_aws_adapter_with_settings(self) -> None:
        settings = Settings(
            translation_provider="aws",
            aws_region="eu-west-2",
            aws_access_key_id="key",
            aws_secret_access_key="secret",
        )
        with patch("doc_translator.translation.factory.AwsTranslateAdapter") as mock_adapter:
            TranslatorFactory.create(settings)
        mock_adapter.assert_called_once_with(
            region="eu-west-2",
            access_key_id="key",
            secret_access_key="secret",
        )

    def test_creates_openai_adapter_with_settings(self) -> None:
        settings = Settings(
            translation_provider="OpenAI",
            openai_api_key="openai-key",
            openai_model_name="gpt-4",
            openai_timeout_seconds=42,
        )
        with patch("doc_translator.translation.factory.OpenAITranslateAdapter") as mock_adapter:
            TranslatorFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            model="gpt-4",
            timeout_seconds=42,
            base_url=None,
        )

    def test_passes_openai_base_url(self) -> None:
        settings = Settings(
            translation_provider="openai",
            openai_base_url=" http://localhost:11434/v1 ",
        )
        with patch("doc_translator.translation.factory.OpenAITranslateAdapter") as mock_adapter:
            TranslatorFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_returns_base_translator(self) -> None:
        translator = TranslatorFactory.create(Settings(translation_provider="example"))
        assert isinstance(translator, BaseTranslator)

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown translation provider"):
            TranslatorFactory.create(Settings(translation_provider="babelfish"))
