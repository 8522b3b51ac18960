"""
Exception types and error handling helpers.

This module provides the small set of error handling patterns used throughout
the application: a severity scale, the ValidationError raised for bad
configuration, and a handler that logs an error at its severity and optionally
re-raises it.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """How loudly a handled error is reported. Values are logging levels."""
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class ValidationError(Exception):
    """
    Exception raised when validation fails.

    This is the main exception type used for configuration problems detected
    at startup. Runtime conditions (unreadable source, missing counters) are
    never reported through it.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


def handle_error(
    error: Exception,
    context: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log an error at its severity and optionally re-raise it.

    Critical errors are logged with their traceback; recoverable runtime
    conditions are reported as WARNING and never re-raised by callers.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']
    effective_logger.log(
        severity.value,
        f"Error in {context}: {error}",
        exc_info=severity is ErrorSeverity.CRITICAL,
    )

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_file_error(error: Exception, context: str, **kwargs) -> None:
    """Handle file-related errors."""
    handle_error(error, f"file {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Handle CLI-related errors by logging them and exiting."""
    exit_code = kwargs.pop('exit_code', 1)

    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
