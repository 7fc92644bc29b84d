"""Tests for input validation and sanitization utilities.

This module tests situation validation to ensure it:
- Properly validates input lengths
- Strips control characters and collapses whitespace
- Handles edge cases gracefully
"""

from unittest.mock import Mock

import pytest

from instrument_engine.config import Config
from instrument_engine.exceptions.validation_error import InputValidationError
from instrument_engine.utils.input_validator import sanitize_situation


class TestSanitizeSituation:
    """Tests for sanitize_situation function."""

    def test_valid_situation(self, mock_config: Mock) -> None:
        """Test that a valid description passes unchanged."""
        situation = "Received a parking notice from the city"
        assert sanitize_situation(situation, config=mock_config) == situation

    def test_whitespace_collapsed(self, mock_config: Mock) -> None:
        """Test that whitespace is trimmed and collapsed."""
        result = sanitize_situation("  Received a\n\nnotice\tfrom the IRS  ", config=mock_config)
        assert result == "Received a notice from the IRS"

    def test_control_characters_removed(self, mock_config: Mock) -> None:
        """Test that control characters are stripped."""
        result = sanitize_situation("Got a\x00 letter\x07 from ACME", config=mock_config)
        assert result == "Got a letter from ACME"

    @pytest.mark.parametrize("situation", [None, "", "   "])
    def test_empty_situation(self, mock_config: Mock, situation: str | None) -> None:
        """Test that an empty description asks the user to describe it first."""
        with pytest.raises(InputValidationError) as exc_info:
            sanitize_situation(situation, config=mock_config)
        assert str(exc_info.value) == "Please describe your situation first."

    def test_situation_too_short(self) -> None:
        """Test that descriptions below minimum length raise error."""
        config = Config(_env_file=None, min_situation_length=10)

        with pytest.raises(InputValidationError) as exc_info:
            sanitize_situation("ticket", config=config)

        assert "too short" in str(exc_info.value).lower()
        assert exc_info.value.context["min_length"] == 10

    def test_situation_too_long(self) -> None:
        """Test that descriptions above maximum length raise error."""
        config = Config(_env_file=None, max_situation_length=100)

        with pytest.raises(InputValidationError) as exc_info:
            sanitize_situation("x" * 101, config=config)

        assert "too long" in str(exc_info.value).lower()
        assert exc_info.value.context["max_length"] == 100
