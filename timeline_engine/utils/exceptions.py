"""
Custom exception classes for the timeline engine.

The parser and the schedule recomputer never raise; edit operations report
"nothing changed" through EditResult. These exceptions cover the remaining
caller-level failures.
"""


class TimelineEngineError(Exception):
    """Base exception for all timeline engine errors."""

    def __init__(self, message: str, context: dict = None):
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class PermanentError(TimelineEngineError):
    """
    Exception for errors that retrying the same call cannot fix.

    Examples:
        - Requesting alternatives with nothing selected
        - Operating on a session that is not editing
    """
    pass


class ValidationError(PermanentError):
    """Exception for caller input that fails validation."""

    def __init__(self, message: str, validation_errors: list = None, context: dict = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            validation_errors: List of specific validation errors
            context: Additional error context
        """
        super().__init__(message, context)
        self.validation_errors = validation_errors or []


class SessionStateError(PermanentError):
    """Exception for an operation that needs an active edit session."""
    pass
