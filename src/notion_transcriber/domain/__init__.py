"""Domain layer exports."""

from .document_formatter import DocumentFormatter
from .media_types import detect_content_type
from .models import (
    ChatCompletion,
    DocumentBlock,
    PipelineOutcome,
    PipelineResult,
    PipelineStage,
    StructuredSummary,
    TranscriptionJob,
    UploadedAudio,
)

__all__ = [
    "ChatCompletion",
    "DocumentBlock",
    "DocumentFormatter",
    "PipelineOutcome",
    "PipelineResult",
    "PipelineStage",
    "StructuredSummary",
    "TranscriptionJob",
    "UploadedAudio",
    "detect_content_type",
]
