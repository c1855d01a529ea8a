"""Structured logger setup shared across the verification Lambda."""

import logging
import os

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "ticket-verification"


def _level_from_environment() -> int:
    """Map LOG_LEVEL to a logging level, INFO when unset or unknown."""
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Every record is tagged with the service and environment so verification
    outcomes can be filtered per stage in CloudWatch Logs Insights.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s",
        rename_fields={"levelname": "level", "asctime": "timestamp"},
        static_fields={
            "service": SERVICE_NAME,
            "environment": os.environ.get("ENVIRONMENT", "dev"),
        },
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(_level_from_environment())
    logger.propagate = False
    return logger
