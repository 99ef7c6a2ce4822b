"""OpenAI Whisper implementation of the TranscriptionService interface."""

from pydantic import BaseModel, ValidationError

from notion_transcriber.exceptions import MalformedResponseError
from notion_transcriber.logging import setup_logging

from .interfaces import TranscriptionService
from .openai_api import PROVIDER, OpenAIApiClient

logger = setup_logging()


class WhisperResponse(BaseModel):
    text: str


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI transcription endpoint."""

    def __init__(self, api: OpenAIApiClient, model: str = "whisper-1"):
        self._api = api
        self._model = model

    def transcribe(self, audio_data: bytes, filename: str) -> str:
        response = self._api.post(
            "audio/transcriptions",
            files={"file": (filename, audio_data)},
            data={"model": self._model},
        )
        try:
            transcript = WhisperResponse.model_validate_json(response.content).text
        except ValidationError as e:
            raise MalformedResponseError(PROVIDER, "missing transcription text", e) from e

        logger.info(
            "Audio transcription successful",
            extra={"file_name": filename, "characters": len(transcript)},
        )
        return transcript
