from pathlib import Path

import pytest

from doc_translator.config.settings import Settings
from tests.factories import build_docx, build_pdf, build_pdf_pages


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return build_pdf("Hello PDF World")


@pytest.fixture()
def hyphenated_pdf_bytes() -> bytes:
    """Second word split across two lines with a trailing hyphen."""
    return build_pdf("A hyphen-", "ated word")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return build_pdf_pages(["Page one content"], ["Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF whose only page is blank, as a scanned upload would read."""
    return build_pdf()


@pytest.fixture()
def bullet_docx_bytes() -> bytes:
    return build_docx("Item1•Item2")


@pytest.fixture()
def local_settings(tmp_path: Path) -> Settings:
    """Settings wired to the filesystem store and the offline translator."""
    return Settings(
        storage_backend="local",
        s3_bucket_name="test-bucket",
        aws_region="eu-west-1",
        local_storage_root=str(tmp_path / "store"),
        upload_tmp_dir=str(tmp_path / "uploads"),
        translation_provider="example",
    )
