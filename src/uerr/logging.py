"""Application logging helpers."""

from __future__ import annotations

import logging as py_logging
import sys
from pathlib import Path
from typing import Literal, TextIO

LOG_LEVELS = {
    "DEBUG": py_logging.DEBUG,
    "INFO": py_logging.INFO,
    "WARN": py_logging.WARNING,
    "WARNING": py_logging.WARNING,
    "ERROR": py_logging.ERROR,
}
LogLevel = Literal["DEBUG", "INFO", "WARN", "ERROR"]
VALID_LOG_LEVELS: tuple[LogLevel, ...] = ("DEBUG", "INFO", "WARN", "ERROR")
LOGGER_NAME = "uerr"
_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def normalize_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized == "WARNING":
        normalized = "WARN"
    return normalized


def configure_logging(
    level: str = "WARN",
    stream: TextIO | None = None,
    *,
    log_file: str | Path | None = None,
) -> py_logging.Logger:
    resolved = LOG_LEVELS.get(normalize_level(level), py_logging.INFO)

    logger = py_logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    formatter = py_logging.Formatter(_FORMAT)

    handler = py_logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_file:
        try:
            log_path = Path(log_file).expanduser()
        except RuntimeError:
            log_path = Path(log_file)
        if not log_path.is_absolute():
            log_path = log_path.resolve()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = py_logging.FileHandler(log_path, encoding="utf-8")
        except OSError:
            pass
        else:
            file_handler.setLevel(py_logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            if resolved > py_logging.DEBUG:
                logger.setLevel(py_logging.DEBUG)
                handler.setLevel(resolved)

    logger.propagate = False
    return logger
