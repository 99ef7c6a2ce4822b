"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel

from notion_transcriber.exceptions import ConfigurationError


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "transcriptions"
    secure: bool = False


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI API configuration."""

    api_key: str
    base_url: str = "https://api.openai.com/v1"
    transcription_model: str = "whisper-1"
    summary_model: str = "gpt-4o-mini"
    timeout_seconds: float = 300.0
    use_fixtures: bool = False
    fixtures_dir: Path = Path("mocks")


class NotionConfig(BaseModel, frozen=True):
    """Notion API and OAuth client configuration."""

    client_id: str
    client_secret: str
    base_url: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"
    timeout_seconds: float = 30.0


class WorkerConfig(BaseModel, frozen=True):
    """Background pipeline worker configuration."""

    max_workers: int = 4


class UploadConfig(BaseModel, frozen=True):
    """Upload validation limits."""

    max_bytes: int = 25 * 1024 * 1024
    allowed_content_types: tuple[str, ...] = ("audio/mpeg", "video/mp4", "video/mpeg")


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    app_uri: str = "http://localhost:4000"
    minio: MinioConfig
    openai: OpenAIConfig
    notion: NotionConfig
    worker: WorkerConfig = WorkerConfig()
    upload: UploadConfig = UploadConfig()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If any required variable is unset or empty.
    """
    use_fixtures = _flag("MOCK_OPENAI")

    required = [
        "MINIO_USER",
        "MINIO_PASSWORD",
        "NOTION_CLIENT_ID",
        "NOTION_CLIENT_SECRET",
    ]
    if not use_fixtures:
        required.append("OPENAI_API_KEY")

    missing = [name for name in required if not os.getenv(name)]
    if missing:
        raise ConfigurationError(missing)

    return AppConfig(
        app_uri=os.getenv("APP_URI", "http://localhost:4000"),
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.environ["MINIO_USER"],
            password=os.environ["MINIO_PASSWORD"],
            bucket_name=os.getenv("MINIO_BUCKET", "transcriptions"),
            secure=_flag("MINIO_SECURE"),
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
            transcription_model=os.getenv("OPENAI_TRANSCRIPTION_MODEL", "whisper-1"),
            summary_model=os.getenv("OPENAI_SUMMARY_MODEL", "gpt-4o-mini"),
            timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "300")),
            use_fixtures=use_fixtures,
            fixtures_dir=Path(os.getenv("OPENAI_FIXTURES_DIR", "mocks")),
        ),
        notion=NotionConfig(
            client_id=os.environ["NOTION_CLIENT_ID"],
            client_secret=os.environ["NOTION_CLIENT_SECRET"],
            base_url=os.getenv("NOTION_BASE_URL", "https://api.notion.com/v1"),
            api_version=os.getenv("NOTION_VERSION", "2022-06-28"),
            timeout_seconds=float(os.getenv("NOTION_TIMEOUT_SECONDS", "30")),
        ),
        worker=WorkerConfig(
            max_workers=int(os.getenv("PIPELINE_MAX_WORKERS", "4")),
        ),
        upload=UploadConfig(
            max_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(25 * 1024 * 1024))),
        ),
    )
