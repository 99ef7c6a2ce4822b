"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from notion_transcriber.dependencies import (
    close_dependencies,
    get_config,
    get_storage,
    get_worker,
)
from notion_transcriber.exceptions import ConfigurationError
from notion_transcriber.logging import setup_logging
from notion_transcriber.routes import auth_router, transcriptions_router

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validates configuration on startup and drains the worker on shutdown."""
    try:
        config = get_config()
    except ConfigurationError as e:
        logger.error("Invalid configuration", extra={"missing": e.missing})
        raise

    logger.info(
        "Starting service",
        extra={"app_uri": config.app_uri, "mock_openai": config.openai.use_fixtures},
    )
    get_storage().ensure_bucket_exists()
    worker = get_worker()

    yield

    # Waits for in-flight runs, off the event loop.
    await asyncio.to_thread(worker.shutdown, True)
    close_dependencies()
    logger.info("Service stopped")


def create_app() -> FastAPI:
    """Builds the application with all routers attached."""
    app = FastAPI(title="Notion Transcriber", lifespan=lifespan)
    app.include_router(auth_router)
    app.include_router(transcriptions_router)
    return app
