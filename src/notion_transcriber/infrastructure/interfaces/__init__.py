"""Infrastructure interface exports."""

from .document_publisher import DocumentPublisher
from .storage_client import StorageClient
from .summarization_service import SummarizationService
from .transcription_service import TranscriptionService

__all__ = [
    "DocumentPublisher",
    "StorageClient",
    "SummarizationService",
    "TranscriptionService",
]
