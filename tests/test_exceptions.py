"""Tests for exception implementations.

This module contains unit tests for all exception classes to verify
inheritance, error messages, and context handling.
"""

import pytest

from instrument_engine.exceptions import (
    BaseInstrumentError,
    InputValidationError,
    SuggestionError,
)


class TestBaseInstrumentError:
    """Tests for BaseInstrumentError."""

    def test_base_error_creation(self) -> None:
        """Test that BaseInstrumentError can be created with a message."""
        error = BaseInstrumentError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.context == {}

    def test_base_error_with_context(self) -> None:
        """Test that BaseInstrumentError can include context."""
        context = {"key": "value", "count": 42}
        error = BaseInstrumentError("Test error", context=context)
        assert error.context == context

    def test_base_error_repr_representation(self) -> None:
        """Test detailed representation of BaseInstrumentError."""
        error = BaseInstrumentError("Test message", context={"key": "value"})
        repr_str = repr(error)
        assert "BaseInstrumentError" in repr_str
        assert "Test message" in repr_str
        assert "context" in repr_str

    def test_repr_without_context(self) -> None:
        """Test that an empty context is left out of the representation."""
        assert repr(BaseInstrumentError("Oops")) == "BaseInstrumentError('Oops')"


class TestSubclasses:
    """Tests for the concrete exception types."""

    @pytest.mark.parametrize("error_class", [InputValidationError, SuggestionError])
    def test_inheritance(self, error_class: type) -> None:
        """Test that each error inherits from BaseInstrumentError."""
        assert issubclass(error_class, BaseInstrumentError)
        assert issubclass(error_class, Exception)

    def test_caught_by_base(self) -> None:
        """Test that a SuggestionError can be caught by the base exception."""
        with pytest.raises(BaseInstrumentError) as exc_info:
            raise SuggestionError("LLM failed", context={"retry_attempts": 3})
        assert exc_info.value.context["retry_attempts"] == 3

    def test_validation_error_not_suggestion_error(self) -> None:
        """Test that the two errors are distinct."""
        assert not issubclass(InputValidationError, SuggestionError)
