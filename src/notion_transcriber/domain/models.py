"""Domain models for the transcription-to-Notion pipeline."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from notion_transcriber.exceptions import MalformedResponseError


class PipelineStage(str, Enum):
    """Ordered stages of a pipeline run."""

    DOWNLOAD = "download"
    TRANSCRIBE = "transcribe"
    SUMMARIZE = "summarize"
    FORMAT = "format"
    PUBLISH = "publish"


class UploadedAudio(BaseModel, frozen=True):
    """Raw audio received from the caller before it is persisted."""

    data: bytes
    filename: str
    content_type: str


class TranscriptionJob(BaseModel, frozen=True):
    """Everything a single pipeline run needs; owned by that run only."""

    job_id: str
    object_name: str
    original_filename: str
    database_id: str = Field(min_length=1)
    access_token: SecretStr

    @property
    def page_title(self) -> str:
        return f"{self.original_filename} Transcribed Audio"


class ChatMessage(BaseModel):
    role: str
    content: str | None = None


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatMessage


class ChatCompletion(BaseModel):
    """The subset of a chat completion body the pipeline reads."""

    choices: list[ChatChoice]


class StructuredSummary(BaseModel):
    """Structured output returned by the summarization model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logical_paragraphs: str
    summary: str
    action_items: list[str] | None = None

    @classmethod
    def from_chat_completion(cls, raw_body: str) -> "StructuredSummary":
        """
        Parses a raw chat completion body into a StructuredSummary.

        The first choice's message content is itself a JSON document that
        must match the declared response schema.

        Args:
            raw_body: The unmodified HTTP response body.

        Returns:
            The parsed StructuredSummary.

        Raises:
            MalformedResponseError: If either JSON layer does not match.
        """
        try:
            completion = ChatCompletion.model_validate_json(raw_body)
        except ValidationError as e:
            raise MalformedResponseError(
                "openai", "body is not a chat completion", cause=e
            ) from e

        if not completion.choices:
            raise MalformedResponseError("openai", "chat completion has no choices")

        content = completion.choices[0].message.content
        if content is None:
            raise MalformedResponseError("openai", "first choice has no content")

        try:
            return cls.model_validate_json(content)
        except ValidationError as e:
            raise MalformedResponseError(
                "openai", "content does not match the summary schema", cause=e
            ) from e


class DocumentBlock(BaseModel, frozen=True):
    """A single Notion content block carrying one text run."""

    type: Literal["heading_2", "paragraph"]
    text: str

    @classmethod
    def heading(cls, text: str) -> "DocumentBlock":
        return cls(type="heading_2", text=text)

    @classmethod
    def paragraph(cls, text: str) -> "DocumentBlock":
        return cls(type="paragraph", text=text)


class PipelineResult(BaseModel, frozen=True):
    """Result of a successful pipeline run."""

    job_id: str
    page_title: str
    block_count: int


class PipelineOutcome(BaseModel, frozen=True):
    """Terminal state of a pipeline run, handed to the completion hook."""

    job_id: str
    succeeded: bool
    result: PipelineResult | None = None
    failed_stage: PipelineStage | None = None
    error: str | None = None
    cause_message: str | None = None
