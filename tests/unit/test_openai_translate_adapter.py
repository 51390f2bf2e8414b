from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from doc_translator.translation.exceptions import TranslationError, TranslationNetworkError
from doc_translator.translation.openai_adapter import OpenAITranslateAdapter, build_messages


def _completion(*contents: str | None) -> MagicMock:
    choices = []
    for content in contents:
        choice = MagicMock()
        choice.message.content = content
        choice.finish_reason = "stop"
        choices.append(choice)
    completion = MagicMock()
    completion.choices = choices
    return completion


def _adapter_with(outcome: object) -> tuple[OpenAITranslateAdapter, MagicMock]:
    client = MagicMock()
    if isinstance(outcome, Exception):
        client.chat.completions.create.side_effect = outcome
    else:
        client.chat.completions.create.return_value = outcome
    adapter = OpenAITranslateAdapter(
        api_key="unused", model="gpt-test", timeout_seconds=5, client=client
    )
    return adapter, client


class TestBuildMessages:
    def test_system_prompt_names_both_languages(self) -> None:
        system, user = build_messages("Good morning", "en", "fr")
        assert system["role"] == "system"
        assert "'en'" in system["content"] and "'fr'" in system["content"]
        assert user == {"role": "user", "content": "Good morning"}


class TestOpenAITranslateAdapter:
    def test_returns_first_choice_as_translation(self) -> None:
        adapter, client = _adapter_with(_completion("Bonjour", "Salut"))

        result = adapter.translate("Good morning", "en", "fr")

        assert result.translated_text == "Bonjour"
        assert (result.source_lang, result.target_lang) == ("en", "fr")
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["temperature"] == 0.0
        assert kwargs["messages"] == build_messages("Good morning", "en", "fr")

    def test_empty_string_passes_through(self) -> None:
        adapter, _ = _adapter_with(_completion(""))
        assert adapter.translate("", "en", "fr").translated_text == ""

    def test_null_content_is_rejected(self) -> None:
        adapter, _ = _adapter_with(_completion(None))
        with pytest.raises(TranslationError, match="empty response"):
            adapter.translate("x", "en", "fr")

    def test_missing_choices_are_rejected(self) -> None:
        adapter, _ = _adapter_with(_completion())
        with pytest.raises(TranslationError, match="no choices"):
            adapter.translate("x", "en", "fr")

    @pytest.mark.parametrize(
        "error",
        [
            openai.APIConnectionError(request=MagicMock()),
            httpx.TimeoutException("timeout"),
            httpx.ConnectError("refused"),
        ],
    )
    def test_transport_failures_are_network_errors(self, error: Exception) -> None:
        adapter, _ = _adapter_with(error)
        with pytest.raises(TranslationNetworkError, match="network error"):
            adapter.translate("x", "en", "fr")

    def test_api_error_is_not_a_network_error(self) -> None:
        adapter, _ = _adapter_with(
            openai.APIError(message="server error", request=MagicMock(), body=None)
        )
        with pytest.raises(TranslationError, match="API error") as info:
            adapter.translate("x", "en", "fr")
        assert not isinstance(info.value, TranslationNetworkError)

    def test_builds_sdk_client_when_none_given(self) -> None:
        with patch(
            "doc_translator.translation.openai_adapter.openai.OpenAI"
        ) as client_cls:
            OpenAITranslateAdapter(
                api_key="k", model="m", timeout_seconds=30, base_url="http://llm.local/v1"
            )
        client_cls.assert_called_once_with(
            api_key="k", timeout=30, base_url="http://llm.local/v1"
        )
