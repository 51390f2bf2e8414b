from pathlib import Path

from doc_translator.config.settings import Settings
from doc_translator.storage.base import BaseBlobStore
from doc_translator.storage.local_adapter import LocalBlobStore
from doc_translator.storage.s3_adapter import S3BlobStore


class BlobStoreFactory:
    """Creates the configured blob store adapter."""

    BACKENDS = ("s3", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        backend = settings.storage_backend.lower()
        if not settings.s3_bucket_name:
            raise ValueError("s3_bucket_name is required")
        if backend == "s3":
            return S3BlobStore(
                bucket=settings.s3_bucket_name,
                domain=settings.resolved_storage_domain,
                region=settings.aws_region,
                access_key_id=settings.aws_access_key_id,
                secret_access_key=settings.aws_secret_access_key,
                endpoint_url=settings.s3_endpoint_url,
            )
        if backend == "local":
            return LocalBlobStore(
                root=Path(settings.local_storage_root),
                bucket=settings.s3_bucket_name,
                domain=settings.resolved_storage_domain,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
