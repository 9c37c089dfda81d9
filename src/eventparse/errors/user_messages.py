"""User-friendly error messages for eventparse.

Human-readable messages and recovery suggestions keyed by error code, used by
the command line front end so users never see a raw traceback for bad input.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Recognition errors
    "MALFORMED_EXPRESSION": "That looks like a date or time, but it can't be used.",
    "MALFORMED_DATE": "That looks like a date, but the month or day is out of range.",
    "INVALID_CALENDAR_DATE": "That day doesn't exist in the calendar.",
    "MALFORMED_TIME": "That looks like a time, but the hour or minute is out of range.",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_CONFIG": "The configuration is invalid. Check settings.",
    "MISSING_CONFIG": "The configuration file wasn't found.",
    # Generic
    "EVENTPARSE_ERROR": "An unexpected error occurred. Please try again.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Recognition errors
    "MALFORMED_EXPRESSION": "Write dates like '6/15' or 'June 15' and times like '7pm'.",
    "MALFORMED_DATE": "Use month/day order, e.g. '6/15' for June 15th.",
    "INVALID_CALENDAR_DATE": "Check the day of month, e.g. February has 28 or 29 days.",
    "MALFORMED_TIME": "Use hours 1-12 with am/pm, or 0-23 on a 24 hour clock.",
    # Configuration errors
    "CONFIGURATION_ERROR": "Check the settings file passed with --config.",
    "INVALID_CONFIG": "Fix the reported field or delete the file to restore defaults.",
    "MISSING_CONFIG": "Create one with: eventparse config init",
    # Generic
    "EVENTPARSE_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Try again with a simpler phrase.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error (exception or error code)."""
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error (exception or error code)."""
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output.

    Args:
        error: The error to format

    Returns:
        CLI-formatted error message
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)
    code = getattr(error, "code", "ERROR")

    lines = [
        f"Error [{code}]: {message}",
        "",
        f"Suggestion: {suggestion}",
    ]

    if getattr(error, "details", None):
        lines.append("")
        lines.append("Details:")
        for key, value in error.details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)


__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_SUGGESTIONS",
    "get_user_message",
    "get_recovery_suggestion",
    "format_error_for_user",
    "format_error_for_cli",
]
