from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from doc_translator.storage.base import BaseBlobStore
from doc_translator.storage.exceptions import StorageError


class S3BlobStore(BaseBlobStore):
    """Stores objects in an Amazon S3 (or S3-compatible) bucket."""

    def __init__(
        self,
        *,
        bucket: str,
        domain: str,
        region: str,
        access_key_id: str = "",
        secret_access_key: str = "",
        endpoint_url: str = "",
        client: Any = None,
    ) -> None:
        super().__init__(bucket=bucket, domain=domain)
        if client is None:
            client = boto3.client(
                "s3",
                region_name=region,
                aws_access_key_id=access_key_id or None,
                aws_secret_access_key=secret_access_key or None,
                endpoint_url=endpoint_url or None,
            )
        self._client = client

    def put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 upload of s3://{self._bucket}/{key} failed: {exc}") from exc

    def get(self, key: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
            return response["Body"].read()
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 download of s3://{self._bucket}/{key} failed: {exc}") from exc
