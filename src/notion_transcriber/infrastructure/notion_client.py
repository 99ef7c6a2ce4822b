"""HTTP client for the Notion public API."""

import base64
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from notion_transcriber.config import NotionConfig
from notion_transcriber.exceptions import (
    MalformedResponseError,
    ProviderError,
    TransportError,
)
from notion_transcriber.logging import setup_logging

logger = setup_logging()

PROVIDER = "notion"

ModelT = TypeVar("ModelT", bound=BaseModel)


class NotionApiError(BaseModel):
    """Error body returned by Notion for non-success statuses."""

    object: str | None = None
    status: int | None = None
    code: str | None = None
    message: str


class TokenResponse(BaseModel):
    """Body of a successful OAuth token exchange."""

    access_token: str
    token_type: str | None = None
    bot_id: str | None = None
    workspace_id: str | None = None
    workspace_name: str | None = None
    workspace_icon: str | None = None
    duplicated_template_id: str | None = None
    request_id: str | None = None


class NotionText(BaseModel):
    content: str


class NotionRichText(BaseModel):
    text: NotionText | None = None
    plain_text: str | None = None


class NotionIcon(BaseModel):
    type: str
    emoji: str | None = None


class NotionDatabase(BaseModel):
    """A database shared with the integration."""

    id: str
    title: list[NotionRichText] = []
    icon: NotionIcon | None = None

    @property
    def display_title(self) -> str:
        parts = []
        for item in self.title:
            if item.plain_text is not None:
                parts.append(item.plain_text)
            elif item.text is not None:
                parts.append(item.text.content)
        return "".join(parts)


class SearchResponse(BaseModel):
    results: list[NotionDatabase]


def bearer(token: str) -> str:
    return f"Bearer {token}"


class NotionApiClient:
    """Talks to Notion on behalf of the integration and its users."""

    def __init__(self, config: NotionConfig, http_client: httpx.Client | None = None):
        self._config = config
        self._http = http_client or httpx.Client(timeout=config.timeout_seconds)

    def close(self) -> None:
        """Releases pooled connections."""
        self._http.close()

    def authorize_url(self, redirect_uri: str) -> str:
        """Returns the consent URL that starts the OAuth flow."""
        url = httpx.URL(
            f"{self._config.base_url.rstrip('/')}/oauth/authorize",
            params={
                "client_id": self._config.client_id,
                "response_type": "code",
                "owner": "user",
                "redirect_uri": redirect_uri,
            },
        )
        return str(url)

    def exchange_code(self, code: str, redirect_uri: str) -> TokenResponse:
        """
        Exchanges an OAuth authorization code for an access token.

        Raises:
            TransportError, ProviderError, MalformedResponseError
        """
        credentials = f"{self._config.client_id}:{self._config.client_secret}"
        encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        response = self._request(
            "POST",
            "oauth/token",
            f"Basic {encoded}",
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
        )
        token = self._decode(TokenResponse, response)
        if not token.access_token:
            raise MalformedResponseError(PROVIDER, "token response has no access token")

        logger.info(
            "Notion token issued",
            extra={"workspace_id": token.workspace_id, "bot_id": token.bot_id},
        )
        return token

    def verify_token(self, access_token: str) -> None:
        """Raises ProviderError if Notion no longer accepts the token."""
        self._request("GET", "users/me", bearer(access_token))

    def search_databases(self, access_token: str) -> list[NotionDatabase]:
        """Lists the databases the user shared with the integration."""
        response = self._request(
            "POST",
            "search",
            bearer(access_token),
            {"filter": {"value": "database", "property": "object"}},
        )
        return self._decode(SearchResponse, response).results

    def create_page(self, access_token: str, page: dict) -> None:
        """Creates a page from a fully built Notion page payload."""
        self._request("POST", "pages", bearer(access_token), page)

    def _request(
        self,
        method: str,
        endpoint: str,
        authorization: str,
        payload: dict | None = None,
    ) -> httpx.Response:
        url = f"{self._config.base_url.rstrip('/')}/{endpoint}"
        headers = {
            "Authorization": authorization,
            "Notion-Version": self._config.api_version,
            "Content-Type": "application/json",
        }
        try:
            response = self._http.request(method, url, headers=headers, json=payload)
        except httpx.TransportError as e:
            logger.exception("Notion request failed", extra={"endpoint": endpoint})
            raise TransportError(PROVIDER, e) from e

        if response.is_success:
            return response

        try:
            error = NotionApiError.model_validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponseError(
                PROVIDER, f"undecodable error body (status {response.status_code})", e
            ) from e

        logger.error(
            "Notion request rejected",
            extra={
                "endpoint": endpoint,
                "status_code": response.status_code,
                "error_code": error.code,
            },
        )
        raise ProviderError(PROVIDER, error.message, response.status_code)

    @staticmethod
    def _decode(model: type[ModelT], response: httpx.Response) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponseError(
                PROVIDER, f"unexpected {model.__name__} body", e
            ) from e
