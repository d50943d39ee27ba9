"""Structured logging for the timeline engine using structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add log level to event dict."""
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def use_console_renderer(log_level: str, environment: str) -> bool:
    """Human-readable output for local debugging, JSON lines everywhere else."""
    return log_level.upper() == "DEBUG" or environment == "development"


def configure_logging(log_level: str = "INFO", environment: str = "production") -> None:
    """
    Configure structlog and the stdlib root logger.

    Tools modules that log through ``logging.getLogger`` end up on the same
    stdout stream as the structlog events.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Deployment environment name from settings
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if use_console_renderer(log_level, environment):
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        # Stop names are Korean; keep them readable in the JSON lines
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__, **context: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a logger, optionally pre-bound with context.

    Args:
        name: Logger name (typically __name__)
        **context: Key/values attached to every event, e.g. component="edit_session"

    Returns:
        Configured structlog logger
    """
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


from .config import settings

configure_logging(settings.log_level, settings.environment)
