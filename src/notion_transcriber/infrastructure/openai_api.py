"""Thin HTTP transport for the OpenAI REST API."""

import httpx
from pydantic import BaseModel, ValidationError

from notion_transcriber.config import OpenAIConfig
from notion_transcriber.exceptions import (
    MalformedResponseError,
    ProviderError,
    TransportError,
)
from notion_transcriber.logging import setup_logging

logger = setup_logging()

PROVIDER = "openai"


class OpenAIErrorDetail(BaseModel):
    message: str
    type: str | None = None
    param: str | None = None
    code: str | None = None


class OpenAIErrorResponse(BaseModel):
    error: OpenAIErrorDetail


class OpenAIApiClient:
    """Sends authenticated requests and maps failures onto the error taxonomy."""

    def __init__(self, config: OpenAIConfig, http_client: httpx.Client | None = None):
        self._config = config
        self._http = http_client or httpx.Client(timeout=config.timeout_seconds)

    def close(self) -> None:
        """Releases pooled connections."""
        self._http.close()

    def post(self, endpoint: str, **kwargs) -> httpx.Response:
        """
        POSTs to an API endpoint relative to the configured base URL.

        Keyword arguments are passed through to httpx (json, data, files).

        Returns:
            The successful response.

        Raises:
            TransportError: On connection failures and timeouts.
            ProviderError: On a non-success status, carrying the API message.
            MalformedResponseError: If the error body cannot be decoded.
        """
        url = f"{self._config.base_url.rstrip('/')}/{endpoint}"
        try:
            response = self._http.post(
                url,
                headers={"Authorization": f"Bearer {self._config.api_key}"},
                **kwargs,
            )
        except httpx.TransportError as e:
            logger.exception("OpenAI request failed", extra={"endpoint": endpoint})
            raise TransportError(PROVIDER, e) from e

        if response.is_success:
            return response

        try:
            error = OpenAIErrorResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponseError(
                PROVIDER, f"undecodable error body (status {response.status_code})", e
            ) from e

        logger.error(
            "OpenAI request rejected",
            extra={
                "endpoint": endpoint,
                "status_code": response.status_code,
                "error_type": error.error.type,
                "error_code": error.error.code,
            },
        )
        raise ProviderError(PROVIDER, error.error.message, response.status_code)
