"""Utility modules for objects-tasks."""

from .errors import (
    ObjectsTasksError,
    ConfigurationError,
    SerializationError,
    SelectorError,
    OrderError,
    DuplicatePartError,
    InvalidCombinatorError,
)

__all__ = [
    "ObjectsTasksError",
    "ConfigurationError",
    "SerializationError",
    "SelectorError",
    "OrderError",
    "DuplicatePartError",
    "InvalidCombinatorError",
]
