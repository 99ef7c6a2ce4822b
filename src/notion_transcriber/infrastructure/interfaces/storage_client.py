"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for file storage backends."""

    @abstractmethod
    def upload(self, data: bytes, original_filename: str, content_type: str) -> str:
        """
        Stores a file under a freshly generated object name.

        Args:
            data: Raw file bytes.
            original_filename: Filename supplied by the uploader; only its
                extension is kept in the object name.
            content_type: MIME type of the file.

        Returns:
            The object name to pass to download().

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def download(self, object_name: str) -> bytes:
        """
        Downloads a file from storage.

        Args:
            object_name: The name returned by upload().

        Returns:
            The exact bytes that were uploaded.

        Raises:
            StorageDownloadError: If the download fails.
        """

    @abstractmethod
    def ensure_bucket_exists(self) -> None:
        """Ensures the configured bucket exists, creating it if necessary."""
