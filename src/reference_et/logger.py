"""
Logging configuration for reference evapotranspiration calculations.

The calculator facade builds its logger here from the ``logging`` section of
the configuration: console output always, a log file when one is configured.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from datetime import datetime


CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler(log_file: str, level: int) -> logging.FileHandler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    name: str = "reference_et",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Configure a logger for reference ET runs.

    Calling it again for the same name replaces (and closes) the handlers
    attached by the previous call.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var; when that
                  is unset too, only the console handler is attached
        log_level: Logging level applied to the logger and all its handlers

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    level = _resolve_level(log_level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        logger.addHandler(_file_handler(log_file, level))

    logger.propagate = False
    return logger


class LoggerContext:
    """Log the start, duration and outcome of one calculation step."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.started_at: Optional[datetime] = None

    def __enter__(self):
        self.started_at = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = (datetime.now() - self.started_at).total_seconds()

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {elapsed:.2f}s")
        else:
            self.logger.error(
                f"Failed {self.operation} after {elapsed:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        # Exceptions always propagate
        return False
