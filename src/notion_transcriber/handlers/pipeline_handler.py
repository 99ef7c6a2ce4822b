"""Handler that runs one upload through the transcription-to-Notion pipeline."""

from collections.abc import Iterator
from contextlib import contextmanager

from notion_transcriber.domain import (
    DocumentFormatter,
    PipelineResult,
    PipelineStage,
    StructuredSummary,
    TranscriptionJob,
)
from notion_transcriber.exceptions import PipelineStageError
from notion_transcriber.infrastructure.interfaces import (
    DocumentPublisher,
    StorageClient,
    SummarizationService,
    TranscriptionService,
)
from notion_transcriber.logging import setup_logging

logger = setup_logging()


@contextmanager
def _stage(stage: PipelineStage) -> Iterator[None]:
    try:
        yield
    except Exception as e:
        raise PipelineStageError(stage.value, e) from e


class PipelineHandler:
    """Orchestrates download, transcription, summarization, formatting and publishing."""

    def __init__(
        self,
        storage: StorageClient,
        transcription_service: TranscriptionService,
        summarization_service: SummarizationService,
        formatter: DocumentFormatter,
        publisher: DocumentPublisher,
    ):
        self._storage = storage
        self._transcription_service = transcription_service
        self._summarization_service = summarization_service
        self._formatter = formatter
        self._publisher = publisher

    def process(self, job: TranscriptionJob) -> PipelineResult:
        """
        Runs every stage in order for a stored upload.

        Each stage consumes only the previous stage's output. The first
        failure stops the run, so nothing is published unless every
        earlier stage succeeded.

        Args:
            job: The stored upload and its destination.

        Returns:
            PipelineResult describing the created page.

        Raises:
            PipelineStageError: If any stage fails; ``cause`` holds the
                stage's original error.
        """
        logger.info(
            "Processing upload",
            extra={"job_id": job.job_id, "object_name": job.object_name},
        )

        with _stage(PipelineStage.DOWNLOAD):
            audio_data = self._storage.download(job.object_name)

        with _stage(PipelineStage.TRANSCRIBE):
            transcript = self._transcription_service.transcribe(
                audio_data, job.original_filename
            )
        logger.debug("Transcription completed", extra={"job_id": job.job_id})

        with _stage(PipelineStage.SUMMARIZE):
            raw_summary = self._summarization_service.summarize(transcript)
        logger.debug("Summary completed", extra={"job_id": job.job_id})

        with _stage(PipelineStage.FORMAT):
            summary = StructuredSummary.from_chat_completion(raw_summary)
            blocks = self._formatter.format(summary)

        with _stage(PipelineStage.PUBLISH):
            self._publisher.publish(
                job.database_id,
                job.page_title,
                blocks,
                job.access_token.get_secret_value(),
            )

        logger.info(
            "Upload processed",
            extra={"job_id": job.job_id, "page_title": job.page_title},
        )

        return PipelineResult(
            job_id=job.job_id,
            page_title=job.page_title,
            block_count=len(blocks),
        )
