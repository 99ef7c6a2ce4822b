"""Tests for application startup, shutdown and cached collaborators."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from notion_transcriber import app as app_module
from notion_transcriber import dependencies
from notion_transcriber.app import create_app
from notion_transcriber.exceptions import ConfigurationError
from notion_transcriber.infrastructure.interfaces import StorageClient
from notion_transcriber.worker import PipelineWorker

REQUIRED_ENV = {
    "MINIO_USER": "minio-user",
    "MINIO_PASSWORD": "minio-pass",
    "NOTION_CLIENT_ID": "client-id",
    "NOTION_CLIENT_SECRET": "client-secret",
    "OPENAI_API_KEY": "sk-test",
}


@pytest.fixture
def env(monkeypatch):
    monkeypatch.delenv("MOCK_OPENAI", raising=False)
    monkeypatch.setenv("PIPELINE_MAX_WORKERS", "1")
    for name, value in REQUIRED_ENV.items():
        monkeypatch.setenv(name, value)
    dependencies.close_dependencies()
    yield monkeypatch
    dependencies.close_dependencies()


class TestLifespan:
    def test_shutdown_drains_worker_and_releases_clients(self, monkeypatch, app_config):
        storage = Mock(spec=StorageClient)
        worker = Mock(spec=PipelineWorker)
        closed = []
        monkeypatch.setattr(app_module, "get_config", lambda: app_config)
        monkeypatch.setattr(app_module, "get_storage", lambda: storage)
        monkeypatch.setattr(app_module, "get_worker", lambda: worker)
        monkeypatch.setattr(app_module, "close_dependencies", lambda: closed.append(True))

        with TestClient(create_app()):
            storage.ensure_bucket_exists.assert_called_once_with()
            worker.shutdown.assert_not_called()

        worker.shutdown.assert_called_once_with(True)
        assert closed == [True]

    def test_startup_fails_on_missing_configuration(self, monkeypatch):
        def missing_config():
            raise ConfigurationError(["MINIO_USER"])

        monkeypatch.setattr(app_module, "get_config", missing_config)

        with pytest.raises(ConfigurationError):
            with TestClient(create_app()):
                pass


class TestCloseDependencies:
    def test_closes_cached_http_clients(self, env):
        notion = dependencies.get_notion_client()
        openai_api = dependencies._get_openai_api()

        dependencies.close_dependencies()

        assert notion._http.is_closed
        assert openai_api._http.is_closed
        assert dependencies.get_notion_client() is not notion

    def test_does_not_build_unused_clients(self, env):
        dependencies.close_dependencies()

        assert dependencies.get_notion_client.cache_info().currsize == 0
        assert dependencies._get_openai_api.cache_info().currsize == 0

    def test_worker_is_rebuilt_after_shutdown(self, env):
        first = dependencies.get_worker()
        first.shutdown(wait=True)

        dependencies.close_dependencies()
        second = dependencies.get_worker()

        assert second is not first
        assert second._executor.submit(lambda: "ready").result(timeout=5) == "ready"
        second.shutdown(wait=True)
