"""Abstract interface for publishing formatted documents."""

from abc import ABC, abstractmethod

from notion_transcriber.domain.models import DocumentBlock


class DocumentPublisher(ABC):
    """Abstract base class for document destinations."""

    @abstractmethod
    def publish(
        self,
        database_id: str,
        title: str,
        blocks: list[DocumentBlock],
        access_token: str,
    ) -> None:
        """
        Creates a new page holding the blocks under the given container.

        Args:
            database_id: Parent container of the new page.
            title: Page title.
            blocks: Ordered content blocks.
            access_token: The end user's bearer token.

        Raises:
            TransportError: If the destination cannot be reached.
            ProviderError: If the destination rejects the page.
            MalformedResponseError: If the error body cannot be decoded.
        """
