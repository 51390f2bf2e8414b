from abc import ABC, abstractmethod
from urllib.parse import quote


class BaseBlobStore(ABC):
    """Contract for all blob storage adapters.

    An adapter is bound to a single bucket. Writing an existing key always
    replaces its content; readers see the old or the new object, never a mix.
    """

    def __init__(self, *, bucket: str, domain: str) -> None:
        self._bucket = bucket
        self._domain = domain

    @property
    def bucket(self) -> str:
        return self._bucket

    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str) -> None:
        """Write data under key, overwriting any existing object.

        Raises:
            StorageError: if the backend rejects the write.
        """

    @abstractmethod
    def get(self, key: str) -> bytes:
        """Read the object stored under key.

        Raises:
            StorageError: if the object is missing or cannot be read.
        """

    def public_url(self, key: str) -> str:
        """Build the public URL: https://{bucket}.{domain}/{key}"""
        return f"https://{self._bucket}.{self._domain}/{quote(key, safe='/')}"
