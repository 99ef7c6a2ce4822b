"""Worker pool that runs pipeline jobs in the background."""

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial

from notion_transcriber.config import WorkerConfig
from notion_transcriber.domain import (
    PipelineOutcome,
    PipelineResult,
    PipelineStage,
    TranscriptionJob,
)
from notion_transcriber.exceptions import PipelineStageError
from notion_transcriber.handlers import PipelineHandler
from notion_transcriber.logging import setup_logging

logger = setup_logging()

CompletionHook = Callable[[PipelineOutcome], None]


class PipelineWorker:
    """Accepts jobs without blocking the caller and reports how each run ended."""

    def __init__(
        self,
        handler: PipelineHandler,
        config: WorkerConfig,
        on_complete: CompletionHook | None = None,
    ):
        self._handler = handler
        self._on_complete = on_complete
        self._executor = ThreadPoolExecutor(
            max_workers=config.max_workers,
            thread_name_prefix="pipeline",
        )

    def submit(self, job: TranscriptionJob) -> "Future[PipelineResult]":
        """Schedules a run and returns immediately."""
        logger.info(
            "Pipeline run queued",
            extra={"job_id": job.job_id, "file_name": job.original_filename},
        )
        future = self._executor.submit(self._handler.process, job)
        future.add_done_callback(partial(self._on_done, job))
        return future

    def shutdown(self, wait: bool = True) -> None:
        """Stops accepting jobs, optionally waiting for in-flight runs."""
        logger.info("Worker shutting down", extra={"wait": wait})
        self._executor.shutdown(wait=wait)

    def _on_done(self, job: TranscriptionJob, future: "Future[PipelineResult]") -> None:
        """Callback for each finished run."""
        error = future.exception()

        if error is None:
            result = future.result()
            logger.info(
                "Pipeline run completed",
                extra={
                    "job_id": job.job_id,
                    "page_title": result.page_title,
                    "block_count": result.block_count,
                },
            )
            outcome = PipelineOutcome(job_id=job.job_id, succeeded=True, result=result)
        else:
            if isinstance(error, PipelineStageError):
                stage = PipelineStage(error.stage)
                cause_message = str(error.cause)
            else:
                stage = None
                cause_message = str(error)

            logger.error(
                "Pipeline run failed",
                exc_info=error,
                extra={
                    "job_id": job.job_id,
                    "file_name": job.original_filename,
                    "stage": stage.value if stage else None,
                    "error": cause_message,
                },
            )
            outcome = PipelineOutcome(
                job_id=job.job_id,
                succeeded=False,
                failed_stage=stage,
                error=str(error),
                cause_message=cause_message,
            )

        if self._on_complete is None:
            return

        try:
            self._on_complete(outcome)
        except Exception:
            logger.exception("Completion hook failed", extra={"job_id": job.job_id})
