"""Audio transcription to Notion page service."""

from notion_transcriber.config import AppConfig, load_config
from notion_transcriber.logging import setup_logging

__all__ = ["AppConfig", "load_config", "setup_logging"]
