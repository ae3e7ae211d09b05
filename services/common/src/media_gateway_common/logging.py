import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _route(logger: logging.Logger, handler: logging.Handler, level: str) -> None:
    logger.setLevel(level)
    logger.handlers = [handler]


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Sends gateway and Uvicorn logs to stdout as one JSON object per line.

    Every line carries timestamp, level, logger name and message, plus the
    Datadog trace_id and span_id when a trace is active. Calling it again
    replaces the handler rather than stacking a second one.

    Args:
        level: Log level name. Defaults to LOG_LEVEL from the environment,
            then INFO.

    Returns:
        The root logger.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    _route(root_logger, handler, level_name)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        _route(server_logger, handler, level_name)
        server_logger.propagate = False

    return root_logger
