"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, filename: str) -> str:
        """
        Transcribes audio data and returns plain text.

        Args:
            audio_data: Raw audio file bytes.
            filename: Original filename, forwarded to the provider.

        Returns:
            The transcript text.

        Raises:
            TransportError: If the provider cannot be reached.
            ProviderError: If the provider rejects the request.
            MalformedResponseError: If the response cannot be decoded.
        """
        pass
