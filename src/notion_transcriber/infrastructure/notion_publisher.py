"""Notion implementation of the DocumentPublisher interface."""

from notion_transcriber.domain.models import DocumentBlock
from notion_transcriber.logging import setup_logging

from .interfaces import DocumentPublisher
from .notion_client import NotionApiClient

logger = setup_logging()


def _rich_text(content: str) -> list[dict]:
    return [{"text": {"content": content}}]


def to_notion_block(block: DocumentBlock) -> dict:
    """Converts a DocumentBlock into a Notion block child object."""
    return {"object": "block", block.type: {"rich_text": _rich_text(block.text)}}


def build_page(database_id: str, title: str, blocks: list[DocumentBlock]) -> dict:
    """Builds the body for a create-page request under a database."""
    return {
        "parent": {"type": "database_id", "database_id": database_id},
        "properties": {"Name": {"title": _rich_text(title)}},
        "children": [to_notion_block(block) for block in blocks],
    }


class NotionPublisher(DocumentPublisher):
    """Publishes formatted transcripts as pages in a Notion database."""

    def __init__(self, client: NotionApiClient):
        self._client = client

    def publish(
        self,
        database_id: str,
        title: str,
        blocks: list[DocumentBlock],
        access_token: str,
    ) -> None:
        self._client.create_page(access_token, build_page(database_id, title, blocks))
        logger.info(
            "Notion page created",
            extra={"database_id": database_id, "title": title, "blocks": len(blocks)},
        )
