"""
Notion Transcriber Service.

Entry point for the HTTP service.
"""

import os

import uvicorn
from ddtrace import patch_all

from notion_transcriber.app import create_app

patch_all()

app = create_app()


def main():
    """Starts the HTTP server."""
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "4000")),
        log_config=None,
    )


if __name__ == "__main__":
    main()
