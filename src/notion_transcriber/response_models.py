"""Response models for the notion-transcriber API."""

from pydantic import BaseModel


class HomeResponse(BaseModel):
    """Returned to callers without a usable Notion token."""

    authenticated: bool
    authorize_url: str


class DatabaseResponse(BaseModel):
    """A Notion database the caller can publish into."""

    id: str
    title: str
    icon: str | None = None


class SubmissionResponse(BaseModel):
    """Acknowledgement shown after an upload was accepted."""

    message: str
