import json
import logging
import os
from typing import Any

PACKAGE_LOGGER = "meetings"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger.

    The level is set once on the package logger from ``LOG_LEVEL`` so every
    module follows it. Nothing is printed until the caller configures
    handlers.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    level = os.environ.get("LOG_LEVEL")
    if level:
        package_logger.setLevel(level.upper())
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return package_logger.getChild(name)


def log_json(logger: logging.Logger, level: str, msg: str, **fields: Any) -> None:
    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        level_value = logging.INFO
    if not logger.isEnabledFor(level_value):
        return
    payload = {"msg": msg, **fields}
    logger.log(level_value, json.dumps(payload, default=str))
