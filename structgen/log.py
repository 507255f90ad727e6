"""Logging setup for structgen.

Log records go to stderr so generated code written to stdout stays clean.
"""

import logging
import os
import sys

import click

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LEVEL_NAMES: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class StyledFormatter(logging.Formatter):
    """Formatter that colors records by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if record.levelno >= logging.ERROR:
            return click.style(message, fg="red")
        if record.levelno >= logging.WARNING:
            return click.style(message, fg="yellow")
        if record.levelno >= logging.INFO:
            return click.style(message, fg="green")
        return click.style(message, dim=True)


def resolve_level(value: str | None) -> int | None:
    """Return a logging level for a name like "DEBUG" or a number like "10".

    Returns None when the value is empty or not recognized.
    """
    if not value:
        return None
    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    return LEVEL_NAMES.get(value)


def resolve_env_log_level() -> int | None:
    """Return the level from STRUCTGEN_LOG_LEVEL, or None if unset."""
    return resolve_level(os.environ.get("STRUCTGEN_LOG_LEVEL"))


def setup_logging(level: int | None = None) -> None:
    """Configure the `structgen` logger.

    If `level` is None, STRUCTGEN_LOG_LEVEL is consulted; the default is
    WARNING.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    logger = logging.getLogger("structgen")
    logger.setLevel(level)

    # Remove existing handlers to prevent duplicate messages on re-setup
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        StyledFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Retrieve a logger under the `structgen` hierarchy."""
    return logging.getLogger(name)
