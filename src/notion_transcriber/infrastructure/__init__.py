"""Infrastructure layer exports."""

from .fixture_services import FixtureSummarizer, FixtureTranscriber
from .minio_storage import MinioStorageClient
from .notion_client import NotionApiClient, NotionDatabase, TokenResponse
from .notion_publisher import NotionPublisher
from .openai_api import OpenAIApiClient
from .openai_summarizer import OpenAISummarizer
from .openai_transcriber import OpenAITranscriber

__all__ = [
    "FixtureSummarizer",
    "FixtureTranscriber",
    "MinioStorageClient",
    "NotionApiClient",
    "NotionDatabase",
    "NotionPublisher",
    "OpenAIApiClient",
    "OpenAISummarizer",
    "OpenAITranscriber",
    "TokenResponse",
]
