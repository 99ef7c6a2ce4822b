"""Audio upload endpoint that starts a background pipeline run."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import RedirectResponse

from notion_transcriber.config import AppConfig, UploadConfig
from notion_transcriber.dependencies import get_config, get_storage, get_worker
from notion_transcriber.domain import (
    TranscriptionJob,
    UploadedAudio,
    detect_content_type,
)
from notion_transcriber.exceptions import InvalidUploadError, StorageUploadError
from notion_transcriber.infrastructure.interfaces import StorageClient
from notion_transcriber.logging import setup_logging
from notion_transcriber.response_models import SubmissionResponse
from notion_transcriber.worker import PipelineWorker

from .auth import TOKEN_COOKIE

logger = setup_logging()

router = APIRouter(prefix="/transcriptions", tags=["transcriptions"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
StorageDep = Annotated[StorageClient, Depends(get_storage)]
WorkerDep = Annotated[PipelineWorker, Depends(get_worker)]


def validate_upload(audio: UploadedAudio, database_id: str, limits: UploadConfig) -> None:
    """
    Checks a submission before anything is stored.

    Raises:
        InvalidUploadError: With the HTTP status the caller should receive.
    """
    if not database_id.strip():
        raise InvalidUploadError("notion-page-id", "no Notion database ID supplied")

    if len(audio.data) > limits.max_bytes:
        raise InvalidUploadError(
            "audio-file",
            f"file is larger than {limits.max_bytes} bytes",
            status_code=413,
        )

    if audio.content_type not in limits.allowed_content_types:
        raise InvalidUploadError(
            "audio-file",
            f"unsupported content type '{audio.content_type}'",
            status_code=400,
        )


@router.post("", status_code=303)
def create_transcription(
    config: ConfigDep,
    storage: StorageDep,
    worker: WorkerDep,
    audio_file: Annotated[UploadFile, File(alias="audio-file")],
    database_id: Annotated[str, Form(alias="notion-page-id")] = "",
    notion_token: Annotated[str | None, Cookie(alias=TOKEN_COOKIE)] = None,
) -> RedirectResponse:
    """
    Accepts an audio upload and publishes its transcription to Notion.

    Stores the file, queues the pipeline and redirects immediately; the
    outcome of the run is only reported in the logs.
    """
    if not notion_token:
        raise HTTPException(status_code=401, detail="Notion authorization required")

    # One byte over the limit is enough to reject the upload.
    data = audio_file.file.read(config.upload.max_bytes + 1)
    audio = UploadedAudio(
        data=data,
        filename=audio_file.filename or "audio",
        content_type=detect_content_type(data),
    )

    try:
        validate_upload(audio, database_id, config.upload)
    except InvalidUploadError as e:
        logger.info(
            "Upload rejected",
            extra={
                "field": e.field,
                "reason": e.reason,
                "file_name": audio.filename,
                "declared_content_type": audio_file.content_type,
            },
        )
        raise HTTPException(status_code=e.status_code, detail=str(e))

    try:
        object_name = storage.upload(audio.data, audio.filename, audio.content_type)
    except StorageUploadError:
        raise HTTPException(status_code=500, detail="File upload failed")

    job = TranscriptionJob(
        job_id=str(uuid.uuid4()),
        object_name=object_name,
        original_filename=audio.filename,
        database_id=database_id.strip(),
        access_token=notion_token,
    )

    logger.info(
        "Received upload request",
        extra={
            "job_id": job.job_id,
            "file_name": audio.filename,
            "object_name": object_name,
            "content_type": audio.content_type,
            "database_id": job.database_id,
        },
    )

    worker.submit(job)

    return RedirectResponse("/transcriptions/submitted", status_code=303)


@router.get("/submitted", response_model=SubmissionResponse)
def transcription_submitted() -> SubmissionResponse:
    """Confirms that an upload was accepted."""
    return SubmissionResponse(
        message="Upload received, the transcription will appear in Notion shortly"
    )
