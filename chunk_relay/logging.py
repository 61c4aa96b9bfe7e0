"""Structured JSON logging shared by the app and uvicorn."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configures structured JSON logging for the relay.

    Replaces the handlers of the root logger and of the uvicorn loggers with a
    single stdout handler so application and server lines share one format.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
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
