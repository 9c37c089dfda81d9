"""Centralized error definitions for eventparse.

This module provides the error hierarchy shared by the recognizers, the
resolvers and the settings layer.

"No match" is never an error: recognizers return ``None`` when they find
nothing. The exceptions below describe text that *looked* like a date or a
time but could not be turned into one (e.g. "13/45", "25:00").

Usage:
    from eventparse.errors import MalformedDateError, handle_error

    try:
        expression = recognize_date("13/45")
    except MalformedDateError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from eventparse.errors.user_messages import (
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class EventParseError(Exception):
    """Base exception for all eventparse errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        recoverable: Whether the caller can carry on with other input
        details: Additional error details for debugging
    """

    code: str = "EVENTPARSE_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Recognition Errors
# =============================================================================


class MalformedExpressionError(EventParseError):
    """A pattern matched but produced an unusable value."""

    code = "MALFORMED_EXPRESSION"
    default_message = "Malformed date or time expression"


class MalformedDateError(MalformedExpressionError):
    """Date-like text with an impossible month or day."""

    code = "MALFORMED_DATE"
    default_message = "Malformed date expression"


class InvalidCalendarDateError(MalformedDateError):
    """The expression resolved to a day that does not exist (e.g. Feb 30)."""

    code = "INVALID_CALENDAR_DATE"
    default_message = "Date does not exist in the calendar"


class MalformedTimeError(MalformedExpressionError):
    """Time-like text with an impossible hour or minute."""

    code = "MALFORMED_TIME"
    default_message = "Malformed time expression"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(EventParseError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    recoverable = False


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""

    code = "MISSING_CONFIG"
    default_message = "Missing required configuration"


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if an error is potentially recoverable."""
    if isinstance(error, EventParseError):
        return error.recoverable
    return False


__all__ = [
    # Base
    "EventParseError",
    # Recognition
    "MalformedExpressionError",
    "MalformedDateError",
    "InvalidCalendarDateError",
    "MalformedTimeError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    "MissingConfigError",
    # Handlers
    "handle_error",
    "is_recoverable",
]
