import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "travel-planner"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
_configured = False


def setup_logging():
    """
    Configures structured JSON logging for the planner backend.

    Every record is written to stdout as one JSON object carrying timestamp,
    level, logger name, message, the ddtrace trace/span ids and a static
    ``service`` field. Uvicorn loggers share the same handler so request logs
    and application logs look alike. The level comes from ``LOG_LEVEL``.

    Handlers are installed once; later calls only return the root logger,
    so modules can call this at import time.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _configured

    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in _UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    _configured = True
    return root_logger
