from __future__ import annotations

import logging
from typing import Optional

import structlog

from splitshare.config import get_settings


def resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        return logging.INFO
    return numeric_level


def configure_logging(level: Optional[str] = None) -> None:
    """Route structlog through stdlib logging; level defaults to LOG_LEVEL."""
    numeric_level = resolve_level(level if level is not None else get_settings().log_level)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
