"""Offline stand-ins that replay recorded OpenAI responses from disk."""

from pathlib import Path

from notion_transcriber.exceptions import FixtureReadError
from notion_transcriber.logging import setup_logging

from .interfaces import SummarizationService, TranscriptionService

logger = setup_logging()

TRANSCRIPTION_FIXTURE = "completed-transcription.txt"
SUMMARY_FIXTURE = "completed-summary.json"


def _read_fixture(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.exception("Fixture read failed", extra={"path": str(path)})
        raise FixtureReadError(str(path), e) from e


class FixtureTranscriber(TranscriptionService):
    """Returns a recorded transcript instead of calling the provider."""

    def __init__(self, fixtures_dir: Path):
        self._path = fixtures_dir / TRANSCRIPTION_FIXTURE

    def transcribe(self, audio_data: bytes, filename: str) -> str:
        logger.info("Using fixture transcription", extra={"file_name": filename})
        return _read_fixture(self._path)


class FixtureSummarizer(SummarizationService):
    """Returns a recorded chat completion body instead of calling the provider."""

    def __init__(self, fixtures_dir: Path):
        self._path = fixtures_dir / SUMMARY_FIXTURE

    def summarize(self, transcript: str) -> str:
        logger.info("Using fixture summary")
        return _read_fixture(self._path)
