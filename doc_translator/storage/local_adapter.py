import os
import tempfile
from pathlib import Path

from doc_translator.storage.base import BaseBlobStore
from doc_translator.storage.exceptions import StorageError


class LocalBlobStore(BaseBlobStore):
    """Stores objects as files under {root}/{bucket}/{key}.

    No network calls. Useful for local development and tests. Overwrites go
    through a temporary file and os.replace so readers never see partial content.
    Content types are not persisted.
    """

    def __init__(self, *, root: Path, bucket: str, domain: str) -> None:
        super().__init__(bucket=bucket, domain=domain)
        self._bucket_dir = Path(root) / bucket

    def put(self, key: str, data: bytes, content_type: str) -> None:
        _ = content_type
        path = self._resolve_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".upload-")
            try:
                with os.fdopen(fd, "wb") as fh:
                    fh.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Local write of {path} failed: {exc}") from exc

    def get(self, key: str) -> bytes:
        path = self._resolve_path(key)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Local read of {path} failed: {exc}") from exc

    def _resolve_path(self, key: str) -> Path:
        if not key or key in (".", "..") or "/" in key or "\\" in key:
            raise StorageError(f"Invalid object key '{key}'")
        return self._bucket_dir / key
