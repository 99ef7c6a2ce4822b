"""MinIO implementation of the StorageClient interface."""

import io
import os
import uuid

from minio import Minio

from notion_transcriber.exceptions import StorageDownloadError, StorageUploadError
from notion_transcriber.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()

UPLOAD_PREFIX = "uploads"


class MinioStorageClient(StorageClient):
    """Handles file storage operations using MinIO."""

    def __init__(self, client: Minio, bucket_name: str):
        self._client = client
        self._bucket_name = bucket_name

    def upload(self, data: bytes, original_filename: str, content_type: str) -> str:
        extension = os.path.splitext(original_filename)[1]
        object_name = f"{UPLOAD_PREFIX}/{uuid.uuid4()}{extension}"
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "object_name": object_name,
                    "size": len(data),
                    "bucket_name": self._bucket_name,
                },
            )
            return object_name
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

    def download(self, object_name: str) -> bytes:
        try:
            response = self._client.get_object(self._bucket_name, object_name)
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "File downloaded from MinIO",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            return data
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info(
                "Bucket already exists", extra={"bucket_name": self._bucket_name}
            )
