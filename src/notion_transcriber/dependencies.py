"""Dependency injection configuration for the notion-transcriber service."""

from functools import lru_cache

from minio import Minio

from notion_transcriber.config import AppConfig, load_config
from notion_transcriber.domain import DocumentFormatter
from notion_transcriber.handlers import PipelineHandler
from notion_transcriber.infrastructure import (
    FixtureSummarizer,
    FixtureTranscriber,
    MinioStorageClient,
    NotionApiClient,
    NotionPublisher,
    OpenAIApiClient,
    OpenAISummarizer,
    OpenAITranscriber,
)
from notion_transcriber.infrastructure.interfaces import (
    StorageClient,
    SummarizationService,
    TranscriptionService,
)
from notion_transcriber.logging import setup_logging
from notion_transcriber.worker import PipelineWorker

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the application configuration, loaded once."""
    return load_config()


@lru_cache
def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    config = get_config().minio
    client = Minio(
        endpoint=config.endpoint,
        access_key=config.user,
        secret_key=config.password,
        secure=config.secure,
    )
    return MinioStorageClient(client, config.bucket_name)


@lru_cache
def get_notion_client() -> NotionApiClient:
    """Returns the configured Notion API client."""
    return NotionApiClient(get_config().notion)


@lru_cache
def _get_openai_api() -> OpenAIApiClient:
    return OpenAIApiClient(get_config().openai)


def get_transcription_service() -> TranscriptionService:
    """Returns the live or fixture-backed transcription service."""
    config = get_config().openai
    if config.use_fixtures:
        return FixtureTranscriber(config.fixtures_dir)
    return OpenAITranscriber(_get_openai_api(), config.transcription_model)


def get_summarization_service() -> SummarizationService:
    """Returns the live or fixture-backed summarization service."""
    config = get_config().openai
    if config.use_fixtures:
        return FixtureSummarizer(config.fixtures_dir)
    return OpenAISummarizer(_get_openai_api(), config.summary_model)


def get_handler() -> PipelineHandler:
    """Returns a pipeline handler wired to the configured services."""
    return PipelineHandler(
        get_storage(),
        get_transcription_service(),
        get_summarization_service(),
        DocumentFormatter(),
        NotionPublisher(get_notion_client()),
    )


@lru_cache
def get_worker() -> PipelineWorker:
    """Returns the process-wide pipeline worker."""
    config = get_config()
    logger.info(
        "Pipeline worker configured",
        extra={
            "max_workers": config.worker.max_workers,
            "use_fixtures": config.openai.use_fixtures,
        },
    )
    return PipelineWorker(get_handler(), config.worker)


def close_dependencies() -> None:
    """Closes cached HTTP clients and drops every cached collaborator."""
    for accessor in (get_notion_client, _get_openai_api):
        if accessor.cache_info().currsize:
            accessor().close()

    for accessor in (get_worker, get_notion_client, _get_openai_api, get_storage, get_config):
        accessor.cache_clear()
