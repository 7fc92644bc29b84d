"""Input validation error exception.

This module defines the InputValidationError exception raised when user
input (such as the situation description sent for AI suggestions) is
empty or outside the configured length limits.
"""

from instrument_engine.exceptions.base import BaseInstrumentError


class InputValidationError(BaseInstrumentError):
    """Raised when user input fails validation."""
    
    pass
