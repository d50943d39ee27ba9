"""
Shared utilities: settings, structured logging and exceptions.
"""
from .config import Settings, settings
from .exceptions import (
    TimelineEngineError,
    PermanentError,
    ValidationError,
    SessionStateError,
)
from .logger import configure_logging, get_logger

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "get_logger",
    "TimelineEngineError",
    "PermanentError",
    "ValidationError",
    "SessionStateError",
]
