from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from doc_translator.translation.base import BaseTranslator
from doc_translator.translation.exceptions import TranslationError, TranslationNetworkError
from doc_translator.translation.models import TranslationResult


class AwsTranslateAdapter(BaseTranslator):
    """Translates text with Amazon Translate's TranslateText API."""

    def __init__(
        self,
        *,
        region: str,
        access_key_id: str = "",
        secret_access_key: str = "",
        client: Any = None,
    ) -> None:
        if client is None:
            client = boto3.client(
                "translate",
                region_name=region,
                aws_access_key_id=access_key_id or None,
                aws_secret_access_key=secret_access_key or None,
            )
        self._client = client

    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        try:
            response = self._client.translate_text(
                Text=text,
                SourceLanguageCode=source_lang,
                TargetLanguageCode=target_lang,
            )
        except ClientError as exc:
            raise TranslationError(f"Amazon Translate rejected the request: {exc}") from exc
        except BotoCoreError as exc:
            raise TranslationNetworkError(f"Amazon Translate network error: {exc}") from exc

        translated = response.get("TranslatedText")
        if translated is None:
            raise TranslationError("Amazon Translate returned no TranslatedText")
        return TranslationResult(
            translated_text=translated,
            source_lang=response.get("SourceLanguageCode", source_lang),
            target_lang=response.get("TargetLanguageCode", target_lang),
        )
