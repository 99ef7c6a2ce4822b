"""Abstract interface for summarization service operations."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for structured-output summarization backends."""

    @abstractmethod
    def summarize(self, transcript: str) -> str:
        """
        Requests paragraphs, a summary and action items for a transcript.

        The response is returned unparsed; schema compliance is checked
        by the caller.

        Args:
            transcript: The transcript text.

        Returns:
            The raw response body.

        Raises:
            TransportError: If the provider cannot be reached.
            ProviderError: If the provider rejects the request.
        """
        pass
