"""Tests for the pipeline orchestration handler."""

from unittest.mock import Mock

import pytest

from conftest import RecordingPublisher, StubSummarizer, StubTranscriber
from notion_transcriber.domain import DocumentBlock, PipelineStage, TranscriptionJob
from notion_transcriber.exceptions import (
    MalformedResponseError,
    PipelineStageError,
    ProviderError,
    StorageDownloadError,
    TransportError,
)


class TestPipelineHandler:
    def test_happy_path(self, build_handler, make_job):
        transcriber = StubTranscriber("Hello world.")
        summarizer = StubSummarizer()
        publisher = RecordingPublisher()
        handler = build_handler(transcriber, summarizer, publisher)
        job = make_job(filename="hello.mp3", data=b"audio-bytes")

        result = handler.process(job)

        assert transcriber.calls == [(b"audio-bytes", "hello.mp3")]
        assert summarizer.calls == ["Hello world."]
        assert publisher.pages == [
            {
                "database_id": "db-123",
                "title": "hello.mp3 Transcribed Audio",
                "blocks": [
                    DocumentBlock.heading("Transcription"),
                    DocumentBlock.paragraph("Hello world."),
                    DocumentBlock.heading("Summary"),
                    DocumentBlock.paragraph("Greeting."),
                ],
                "access_token": "secret-token",
            }
        ]
        assert result.job_id == job.job_id
        assert result.page_title == "hello.mp3 Transcribed Audio"
        assert result.block_count == 4

    def test_missing_object_fails_download_stage(self, build_handler):
        transcriber = StubTranscriber()
        handler = build_handler(transcriber=transcriber)
        job = TranscriptionJob(
            job_id="j",
            object_name="uploads/missing.mp3",
            original_filename="missing.mp3",
            database_id="db",
            access_token="tok",
        )

        with pytest.raises(PipelineStageError) as exc_info:
            handler.process(job)

        assert exc_info.value.stage == PipelineStage.DOWNLOAD.value
        assert isinstance(exc_info.value.cause, StorageDownloadError)
        assert transcriber.calls == []

    def test_transcription_failure_stops_the_run(self, build_handler, make_job):
        summarizer = Mock()
        formatter = Mock()
        publisher = Mock()
        handler = build_handler(
            transcriber=StubTranscriber(error=TransportError("openai")),
            summarizer=summarizer,
            publisher=publisher,
        )
        handler._formatter = formatter

        with pytest.raises(PipelineStageError) as exc_info:
            handler.process(make_job())

        assert exc_info.value.stage == "transcribe"
        assert isinstance(exc_info.value.cause, TransportError)
        summarizer.summarize.assert_not_called()
        formatter.format.assert_not_called()
        publisher.publish.assert_not_called()

    def test_summarization_failure_stops_the_run(self, build_handler, make_job):
        publisher = RecordingPublisher()
        handler = build_handler(
            summarizer=StubSummarizer(error=ProviderError("openai", "model overloaded")),
            publisher=publisher,
        )

        with pytest.raises(PipelineStageError) as exc_info:
            handler.process(make_job())

        assert exc_info.value.stage == "summarize"
        assert exc_info.value.cause.message == "model overloaded"
        assert publisher.pages == []

    def test_schema_violation_fails_format_stage(self, build_handler, make_job):
        publisher = RecordingPublisher()
        handler = build_handler(
            summarizer=StubSummarizer(payload={"paragraphs": "wrong key"}),
            publisher=publisher,
        )

        with pytest.raises(PipelineStageError) as exc_info:
            handler.process(make_job())

        assert exc_info.value.stage == "format"
        assert isinstance(exc_info.value.cause, MalformedResponseError)
        assert publisher.pages == []

    def test_publisher_rejection_carries_provider_message(self, build_handler, make_job):
        handler = build_handler(
            publisher=RecordingPublisher(
                error=ProviderError("notion", "Invalid request", 400)
            )
        )

        with pytest.raises(PipelineStageError) as exc_info:
            handler.process(make_job())

        cause = exc_info.value.cause
        assert exc_info.value.stage == "publish"
        assert isinstance(cause, ProviderError)
        assert cause.message == "Invalid request"

    def test_multi_paragraph_transcript(self, build_handler, make_job):
        publisher = RecordingPublisher()
        handler = build_handler(
            summarizer=StubSummarizer(
                payload={
                    "logical_paragraphs": "First.\n\nSecond.\n\nThird.",
                    "summary": "Three points.",
                    "action_items": ["Follow up"],
                }
            ),
            publisher=publisher,
        )

        result = handler.process(make_job())

        texts = [block.text for block in publisher.pages[0]["blocks"]]
        assert texts == [
            "Transcription",
            "First.",
            "Second.",
            "Third.",
            "Summary",
            "Three points.",
        ]
        assert result.block_count == 6
