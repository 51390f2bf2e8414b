from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    aws_region: str = "us-east-1"
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""

    storage_backend: str = "s3"
    s3_bucket_name: str = ""
    s3_endpoint_url: str = ""
    storage_domain: str = ""
    local_storage_root: str = "storage"

    max_upload_bytes: int = 20 * 1024 * 1024
    upload_tmp_dir: str = "uploads"
    download_before_extract: bool = True

    pdf_engine: str = "pdfplumber"

    translation_provider: str = "aws"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 30
    openai_base_url: str = ""

    @property
    def resolved_storage_domain(self) -> str:
        """Host suffix used to build public object URLs."""
        if self.storage_domain:
            return self.storage_domain
        return f"s3.{self.aws_region}.amazonaws.com"
