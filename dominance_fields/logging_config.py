"""
structlog setup for command-line use.

Library code only obtains loggers with structlog.get_logger(); applications
decide how events are rendered by calling configure_logging().
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from .config import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog rendering and filtering.

    Args:
        level: Minimum level name (default from settings)
        fmt: "json" or "console" (default from settings)
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    renderer = (
        structlog.processors.JSONRenderer()
        if (fmt or settings.log_format) == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=False,
    )
