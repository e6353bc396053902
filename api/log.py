"""structlog setup for the API process and the CLIs."""

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(level: str = "INFO", file: TextIO | None = None) -> None:
    """Render key/value console logs to *file* (stderr), dropping anything below *level*.

    Stdout stays free for command output.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file or sys.stderr),
    )
