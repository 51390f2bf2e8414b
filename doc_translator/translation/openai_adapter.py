import httpx
import openai

from doc_translator.logging.logger import Log
from doc_translator.translation.base import BaseTranslator
from doc_translator.translation.exceptions import TranslationError, TranslationNetworkError
from doc_translator.translation.models import TranslationResult

SYSTEM_PROMPT = (
    "You are a professional translation engine. Translate the user's text from "
    "language code '{source_lang}' to language code '{target_lang}'. Preserve line "
    "breaks and bullet markers. Reply with the translated text only."
)


def build_messages(text: str, source_lang: str, target_lang: str) -> list[dict[str, str]]:
    system = SYSTEM_PROMPT.format(source_lang=source_lang, target_lang=target_lang)
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": text},
    ]


class OpenAITranslateAdapter(BaseTranslator):
    """Translator backed by an OpenAI-compatible chat completion endpoint.

    The whole document goes out as a single user message. Output is taken
    verbatim from the first choice, so the model is asked for the translation
    alone with no commentary.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        client: openai.OpenAI | None = None,
    ) -> None:
        self._model = model
        if client is None:
            client = openai.OpenAI(api_key=api_key, timeout=timeout_seconds, base_url=base_url)
        self._client = client

    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        try:
            completion = self._client.chat.completions.create(
                model=self._model,
                temperature=0.0,
                messages=build_messages(text, source_lang, target_lang),
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranslationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise TranslationError(f"AI provider API error: {exc}") from exc

        if not completion.choices:
            raise TranslationError("AI returned no choices")
        translated = completion.choices[0].message.content
        if translated is None:
            raise TranslationError("AI returned empty response")

        Log.debug(
            f"{self._model} translated {len(text)} chars {source_lang}->{target_lang}",
            finish_reason=completion.choices[0].finish_reason,
        )
        return TranslationResult(
            translated_text=translated,
            source_lang=source_lang,
            target_lang=target_lang,
        )
