"""Tests for structured logging setup."""

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from notion_transcriber.logging import setup_logging


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_returns_root_logger(self, restore_root_handlers):
        assert setup_logging() is logging.getLogger()

    def test_emits_json_with_extra_fields(self, capsys, restore_root_handlers):
        setup_logging()

        logging.getLogger("notion_transcriber.test").info(
            "Pipeline run completed", extra={"job_id": "job-7"}
        )

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "Pipeline run completed"
        assert record["levelname"] == "INFO"
        assert record["name"] == "notion_transcriber.test"
        assert record["job_id"] == "job-7"

    def test_level_from_environment(self, monkeypatch, restore_root_handlers):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert setup_logging().level == logging.DEBUG

    def test_records_service_and_thread(self, capsys, restore_root_handlers):
        setup_logging()

        logging.getLogger("notion_transcriber.test").warning("Upload rejected")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["service"] == "notion-transcriber"
        assert record["threadName"] == "MainThread"

    def test_uses_current_formatter_module(self, restore_root_handlers):
        root = setup_logging()

        assert isinstance(root.handlers[0].formatter, JsonFormatter)
