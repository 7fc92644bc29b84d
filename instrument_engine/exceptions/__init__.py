"""Custom exception classes for the instrument engine.

This package contains the exception hierarchy:
- BaseInstrumentError: Base exception for all instrument engine errors
- InputValidationError: Raised when user input fails validation
- SuggestionError: Raised when AI proof-point suggestion fails
"""

from instrument_engine.exceptions.base import BaseInstrumentError
from instrument_engine.exceptions.validation_error import InputValidationError
from instrument_engine.exceptions.suggestion_error import SuggestionError

__all__ = [
    "BaseInstrumentError",
    "InputValidationError",
    "SuggestionError",
]
