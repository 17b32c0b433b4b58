"""Logging helpers shared by the parser and the command line."""
from __future__ import annotations

import logging
from typing import Any, Dict

import orjson

from .config import LoggingConfig


def configure_logger(config: LoggingConfig) -> logging.Logger:
    logger = logging.getLogger(config.logger_name)
    logger.setLevel(config.numeric_level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def log_event(logger: logging.Logger, event: str, **payload: Any) -> None:
    data: Dict[str, Any] = {"event": event, **payload}
    logger.info(orjson.dumps(data).decode("utf-8"))
