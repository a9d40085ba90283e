"""
Logging configuration for tvguide.

This module configures structlog on top of the standard library logging
module. Output goes to stderr so command results on stdout stay clean.
"""

from __future__ import annotations

import logging
import sys

import structlog

from .settings import settings

HANDLER_NAME = "tvguide"


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog with a JSON or console renderer."""
    level_name = (level or settings.log_level).upper()
    renderer_name = fmt or settings.log_format

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [h for h in root.handlers if h.get_name() != HANDLER_NAME] + [handler]
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if renderer_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

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
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a configured logger with service context."""
    logger = structlog.get_logger(name)
    return logger.bind(service="tvguide", env=settings.env)
