"""Structlog configuration helpers."""
from __future__ import annotations

import logging
from typing import Optional

import structlog

from commandbus.core.config import Settings, settings as default_settings


def configure_structlog(json_output: bool = True) -> None:
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.getLogger(__name__).info("structlog configured")


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured level to the package loggers and set up structlog."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)
    logging.getLogger("commandbus").setLevel(settings.LOG_LEVEL)
    configure_structlog(json_output=settings.LOG_JSON)
