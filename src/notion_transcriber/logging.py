"""Structured JSON logging shared by the web app and the pipeline worker."""

import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "notion-transcriber"
LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(threadName)s "
    "%(message)s %(trace_id)s %(span_id)s"
)


def setup_logging():
    """
    Configures and sets up structured JSON logging for the application.

    Every record is a JSON object with timestamp, level, logger name, the
    emitting thread (pipeline runs log from ``pipeline_*`` threads), message,
    the ddtrace trace_id/span_id and a constant ``service`` field. The root
    logger and the Uvicorn loggers share a single stdout handler.

    The level is taken from the LOG_LEVEL environment variable (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    formatter = JsonFormatter(LOG_FORMAT, static_fields={"service": SERVICE_NAME})
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
