"""Structured logging setup."""

import logging

import structlog

from src.core.config import settings


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structured logging with structlog.

    log_format="json": JSON lines to stdout (production).
    log_format="console": colored console output (development).
    """
    level = level or settings.log_level
    log_format = log_format or settings.log_format

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
