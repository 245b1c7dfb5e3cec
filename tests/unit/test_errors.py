"""Tests for error classes."""

from objects_tasks.utils.errors import (
    ConfigurationError,
    DuplicatePartError,
    InvalidCombinatorError,
    ObjectsTasksError,
    OrderError,
    SelectorError,
    SerializationError,
    format_selector_errors,
)


class TestErrors:
    """Test cases for the error hierarchy."""

    def test_base_error(self):
        """Test message and details on the base class."""
        error = ObjectsTasksError("boom", {"key": "value"})

        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.details == {"key": "value"}
        assert ObjectsTasksError("boom").details == {}

    def test_hierarchy(self):
        """Test that all errors derive from the base class."""
        for cls in (ConfigurationError, SerializationError, SelectorError):
            assert issubclass(cls, ObjectsTasksError)
        for cls in (OrderError, DuplicatePartError, InvalidCombinatorError):
            assert issubclass(cls, SelectorError)

    def test_selector_error_fields(self):
        """Test selector and part attributes."""
        error = OrderError("misordered", selector="div.a", part="id")

        assert error.selector == "div.a"
        assert error.part == "id"

    def test_invalid_combinator_error(self):
        """Test the combinator error message."""
        error = InvalidCombinatorError("|")

        assert error.combinator == "|"
        assert "'|'" in error.message

    def test_serialization_error(self):
        """Test the operation attribute."""
        error = SerializationError("decode", "bad json")

        assert error.operation == "decode"
        assert error.message == "bad json"


class TestFormatSelectorErrors:
    """Test cases for format_selector_errors."""

    def test_no_errors(self):
        """Test formatting an empty list."""
        assert format_selector_errors([]) == "No errors"

    def test_errors_with_location(self):
        """Test formatting errors with part and selector."""
        errors = [
            OrderError("misordered", selector="div.a", part="id"),
            DuplicatePartError("repeated", part="element"),
            SelectorError("plain"),
        ]

        assert format_selector_errors(errors) == (
            "Part: id, Selector: div.a: misordered\n"
            "Part: element: repeated\n"
            "plain"
        )
