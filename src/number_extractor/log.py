"""Structured logging (structlog over stdlib logging, JSON lines on stderr).

stdout belongs to the CLI's JSON output, so logs never go there.
Nothing the extractor logs influences its results.

Library code only asks for loggers; handlers and levels stay with the
host application.  The CLI and the sidecar call ``configure_logging``.
"""

from __future__ import annotations
import logging
import os
import sys

import structlog

DEFAULT_LEVEL = os.environ.get("NUMBER_EXTRACTOR_LOG_LEVEL", "WARNING")
PACKAGE_LOGGER = "number_extractor"


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Set up logging for a command-line entry point.

    Adds a stderr handler if the process has none yet and sets the level of
    the ``number_extractor`` loggers.  The root logger's level is left alone.
    """
    level_no = getattr(logging, (level or DEFAULT_LEVEL).upper(), logging.WARNING)
    if not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger().addHandler(handler)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level_no)
    _configure_structlog()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger.  Sets up the structlog pipeline on first use, nothing else."""
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)
