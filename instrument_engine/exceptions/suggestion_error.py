"""Suggestion error exception.

This module defines the SuggestionError exception raised when the AI
suggestion service cannot produce proof points: the LLM call failed after
retries, or its response contained no usable points.
"""

from instrument_engine.exceptions.base import BaseInstrumentError


class SuggestionError(BaseInstrumentError):
    """Raised when proof-point suggestion fails."""
    
    pass
