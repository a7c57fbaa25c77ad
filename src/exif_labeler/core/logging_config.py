"""Centralized logging configuration for the EXIF labeler."""

import os
import sys
import logging
from typing import List, Optional

STDOUT_HANDLER_NAME = "exif-labeler.stdout"
STDERR_HANDLER_NAME = "exif-labeler.stderr"


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    """Handlers installed by setup_logger, told apart from foreign ones by name."""
    return [
        handler
        for handler in logger.handlers
        if handler.get_name() in (STDOUT_HANDLER_NAME, STDERR_HANDLER_NAME)
    ]


class _BelowWarningFilter(logging.Filter):
    """Let only records below WARNING through (stdout side of the split)."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "structured":
        return logging.Formatter(
            "%(asctime)s | %(name)s | %(levelname)-8s | "
            "%(filename)s:%(lineno)d | %(funcName)s() | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    return logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def setup_logger(
    name: str = "exif-labeler",
    level: Optional[str] = None,
    format_type: str = "structured",
) -> logging.Logger:
    """
    Setup centralized logging with environment variable configuration.

    Progress lines (DEBUG/INFO) go to stdout, problems (WARNING and above)
    go to stderr so a failed run is visible on the error channel.

    Args:
        name: Logger name (defaults to "exif-labeler")
        level: Log level override (defaults to env var or INFO)
        format_type: Logging format ("structured" or "simple")

    Returns:
        Configured logger instance

    Environment Variables:
        LOG_LEVEL: Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_FORMAT: Set format type ("structured" or "simple")
    """
    logger = logging.getLogger(name)

    if level:
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        env_level = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = getattr(logging, env_level, logging.INFO)

    logger.setLevel(log_level)

    # Only our own handlers count; foreign ones (e.g. pytest's caplog) don't
    if not _own_handlers(logger):
        env_format = os.getenv("LOG_FORMAT", format_type).lower()
        formatter = _build_formatter(env_format)

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.set_name(STDOUT_HANDLER_NAME)
        stdout_handler.addFilter(_BelowWarningFilter())
        stdout_handler.setFormatter(formatter)

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.set_name(STDERR_HANDLER_NAME)
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(formatter)

        logger.addHandler(stdout_handler)
        logger.addHandler(stderr_handler)

    logger.propagate = False
    return logger


def get_logger(name: str = "exif-labeler") -> logging.Logger:
    """Get a logger instance with consistent configuration."""
    return setup_logger(name)


def set_debug_logging(enabled: bool = True) -> None:
    """Switch the package loggers (and the root logger) to DEBUG."""
    if not enabled:
        return
    for existing in list(logging.Logger.manager.loggerDict.values()):
        if isinstance(existing, logging.Logger) and existing.name.startswith(
            "exif-labeler"
        ):
            existing.setLevel(logging.DEBUG)
    logging.getLogger().setLevel(logging.DEBUG)


# Create default logger instance
logger = setup_logger()
