"""Notion authorization endpoints."""

from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException
from fastapi.responses import JSONResponse, RedirectResponse

from notion_transcriber.config import AppConfig
from notion_transcriber.dependencies import get_config, get_notion_client
from notion_transcriber.exceptions import (
    MalformedResponseError,
    ProviderError,
    TransportError,
)
from notion_transcriber.infrastructure import NotionApiClient
from notion_transcriber.logging import setup_logging
from notion_transcriber.response_models import DatabaseResponse, HomeResponse

logger = setup_logging()

TOKEN_COOKIE = "notion_token"
TOKEN_MAX_AGE_SECONDS = 3600

router = APIRouter(tags=["auth"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
NotionDep = Annotated[NotionApiClient, Depends(get_notion_client)]
TokenCookie = Annotated[str | None, Cookie(alias=TOKEN_COOKIE)]


def _redirect_uri(config: AppConfig) -> str:
    return f"{config.app_uri.rstrip('/')}/auth/callback"


def _unauthenticated(config: AppConfig, notion: NotionApiClient) -> JSONResponse:
    body = HomeResponse(
        authenticated=False,
        authorize_url=notion.authorize_url(_redirect_uri(config)),
    )
    return JSONResponse(body.model_dump())


@router.get("/", response_model=None)
def home(config: ConfigDep, notion: NotionDep, notion_token: TokenCookie = None):
    """Sends authorized callers on, everyone else gets the consent URL."""
    if not notion_token:
        return _unauthenticated(config, notion)

    try:
        notion.verify_token(notion_token)
    except (ProviderError, MalformedResponseError):
        logger.info("Stored Notion token rejected, clearing cookie")
        response = _unauthenticated(config, notion)
        response.delete_cookie(TOKEN_COOKIE, path="/", httponly=True)
        return response
    except TransportError:
        raise HTTPException(status_code=502, detail="Notion is unreachable")

    return RedirectResponse("/databases", status_code=303)


@router.get("/auth/callback")
def auth_callback(
    config: ConfigDep,
    notion: NotionDep,
    code: str = "",
    error: str = "",
) -> RedirectResponse:
    """Completes the OAuth flow and stores the access token in a cookie."""
    if error == "access_denied":
        raise HTTPException(status_code=400, detail="Notion access was denied")
    if not code:
        raise HTTPException(status_code=400, detail="No authorization code supplied")

    try:
        token = notion.exchange_code(code, _redirect_uri(config))
    except (TransportError, ProviderError, MalformedResponseError):
        logger.exception("Notion token exchange failed")
        raise HTTPException(
            status_code=502, detail="Could not obtain a Notion access token"
        )

    response = RedirectResponse("/databases", status_code=303)
    response.set_cookie(
        TOKEN_COOKIE,
        token.access_token,
        max_age=TOKEN_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        secure=True,
        samesite="lax",
    )
    return response


@router.get("/databases", response_model=list[DatabaseResponse])
def list_databases(notion: NotionDep, notion_token: TokenCookie = None):
    """Lists the Notion databases a transcription can be published into."""
    if not notion_token:
        return RedirectResponse("/", status_code=303)

    try:
        databases = notion.search_databases(notion_token)
    except (TransportError, ProviderError, MalformedResponseError):
        logger.exception("Notion database search failed")
        raise HTTPException(status_code=502, detail="Could not list Notion databases")

    return [
        DatabaseResponse(
            id=database.id,
            title=database.display_title,
            icon=database.icon.emoji if database.icon else None,
        )
        for database in databases
    ]
