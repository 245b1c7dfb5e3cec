"""Custom error classes for objects-tasks."""

from typing import Optional, Dict, Any, List


class ObjectsTasksError(Exception):
    """Base exception class for objects-tasks."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ObjectsTasksError):
    """Exception raised when configuration is invalid."""

    pass


class SerializationError(ObjectsTasksError):
    """Exception raised when JSON encoding or decoding fails."""

    def __init__(self, operation: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.operation = operation


class SelectorError(ObjectsTasksError):
    """Exception raised when a selector cannot be built."""

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        part: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.selector = selector
        self.part = part


class OrderError(SelectorError):
    """Exception raised when selector parts are appended out of order."""

    pass


class DuplicatePartError(SelectorError):
    """Exception raised when element, id or pseudo-element occurs twice."""

    pass


class InvalidCombinatorError(SelectorError):
    """Exception raised when combining selectors with an unknown combinator."""

    def __init__(self, combinator: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Unknown combinator {combinator!r}, expected one of ' ', '+', '~', '>'",
            part="combinator",
            details=details,
        )
        self.combinator = combinator


def format_selector_errors(errors: List[SelectorError]) -> str:
    """Format a list of selector errors into a readable string."""
    if not errors:
        return "No errors"

    formatted_errors = []
    for error in errors:
        parts = []

        if error.part:
            parts.append(f"Part: {error.part}")

        if error.selector:
            parts.append(f"Selector: {error.selector}")

        location = ", ".join(parts)
        if location:
            formatted_errors.append(f"{location}: {error.message}")
        else:
            formatted_errors.append(error.message)

    return "\n".join(formatted_errors)
