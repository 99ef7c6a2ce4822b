"""OpenAI chat completion implementation of the SummarizationService interface."""

from notion_transcriber.logging import setup_logging

from .interfaces import SummarizationService
from .openai_api import OpenAIApiClient

logger = setup_logging()

SYSTEM_PROMPT = (
    "You are an assistant whose job is to take an audio transcription and first "
    "break up the text into logical paragraphs separated by a blank line. Each "
    "paragraph needs to be under 2000 characters. Then create a summary of the "
    "transcription and list any action items mentioned in it."
)

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "logical_paragraphs": {
            "description": "The logical paragraphs of the transcribed audio",
            "type": "string",
        },
        "summary": {
            "description": "The summary of the transcribed audio",
            "type": "string",
        },
        "action_items": {
            "description": "Action items mentioned in the transcribed audio",
            "type": "array",
            "items": {"type": "string"},
        },
    },
    "required": ["logical_paragraphs", "summary"],
    "additionalProperties": False,
}


def build_chat_request(model: str, transcript: str) -> dict:
    """Builds a chat completion request constrained to RESPONSE_SCHEMA."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": transcript},
        ],
        "response_format": {
            "type": "json_schema",
            "json_schema": {
                "name": "response_schema",
                "schema": RESPONSE_SCHEMA,
            },
        },
    }


class OpenAISummarizer(SummarizationService):
    """Summarizes transcripts with an OpenAI chat model using structured output."""

    def __init__(self, api: OpenAIApiClient, model: str = "gpt-4o-mini"):
        self._api = api
        self._model = model

    def summarize(self, transcript: str) -> str:
        response = self._api.post(
            "chat/completions", json=build_chat_request(self._model, transcript)
        )
        logger.info(
            "Summarization completed",
            extra={"model": self._model, "transcript_characters": len(transcript)},
        )
        return response.text
