import json
import threading

import pytest

from notion_transcriber.config import (
    AppConfig,
    MinioConfig,
    NotionConfig,
    OpenAIConfig,
    WorkerConfig,
)
from notion_transcriber.domain import DocumentFormatter, TranscriptionJob
from notion_transcriber.exceptions import StorageDownloadError
from notion_transcriber.handlers import PipelineHandler
from notion_transcriber.infrastructure.interfaces import (
    DocumentPublisher,
    StorageClient,
    SummarizationService,
    TranscriptionService,
)


def chat_completion_body(content) -> str:
    """Wraps structured content the way the chat completions API returns it."""
    if not isinstance(content, str):
        content = json.dumps(content)
    return json.dumps(
        {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }
    )


class FakeStorage(StorageClient):
    def __init__(self):
        self.objects = {}
        self.content_types = {}

    def upload(self, data, original_filename, content_type):
        object_name = f"uploads/{len(self.objects)}-{original_filename}"
        self.objects[object_name] = data
        self.content_types[object_name] = content_type
        return object_name

    def download(self, object_name):
        try:
            return self.objects[object_name]
        except KeyError as e:
            raise StorageDownloadError(object_name, e) from e

    def ensure_bucket_exists(self):
        pass


class StubTranscriber(TranscriptionService):
    def __init__(self, text="Hello world.", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def transcribe(self, audio_data, filename):
        self.calls.append((audio_data, filename))
        if self.error is not None:
            raise self.error
        return self.text


class StubSummarizer(SummarizationService):
    def __init__(self, payload=None, error=None):
        self.payload = payload or {
            "logical_paragraphs": "Hello world.",
            "summary": "Greeting.",
            "action_items": [],
        }
        self.error = error
        self.calls = []

    def summarize(self, transcript):
        self.calls.append(transcript)
        if self.error is not None:
            raise self.error
        return chat_completion_body(self.payload)


class RecordingPublisher(DocumentPublisher):
    def __init__(self, error=None):
        self.error = error
        self.pages = []
        self._lock = threading.Lock()

    def publish(self, database_id, title, blocks, access_token):
        if self.error is not None:
            raise self.error
        with self._lock:
            self.pages.append(
                {
                    "database_id": database_id,
                    "title": title,
                    "blocks": list(blocks),
                    "access_token": access_token,
                }
            )


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(
        app_uri="http://localhost:4000",
        minio=MinioConfig(endpoint="minio:9000", user="user", password="secret"),
        openai=OpenAIConfig(api_key="sk-test", fixtures_dir=tmp_path),
        notion=NotionConfig(client_id="client-id", client_secret="client-secret"),
        worker=WorkerConfig(max_workers=2),
    )


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def make_job(storage):
    def _make_job(
        filename="meeting.mp3",
        database_id="db-123",
        access_token="secret-token",
        data=b"ID3-audio",
        job_id="job-1",
    ):
        object_name = storage.upload(data, filename, "audio/mpeg")
        return TranscriptionJob(
            job_id=job_id,
            object_name=object_name,
            original_filename=filename,
            database_id=database_id,
            access_token=access_token,
        )

    return _make_job


@pytest.fixture
def build_handler(storage):
    def _build_handler(transcriber=None, summarizer=None, publisher=None):
        return PipelineHandler(
            storage,
            transcriber or StubTranscriber(),
            summarizer or StubSummarizer(),
            DocumentFormatter(),
            publisher or RecordingPublisher(),
        )

    return _build_handler
