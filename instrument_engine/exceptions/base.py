"""Base exception class for all instrument engine errors.

Template rendering itself never raises; these exceptions cover the
surrounding input validation and AI suggestion paths.
"""


class BaseInstrumentError(Exception):
    """Base exception for all instrument engine errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize base instrument error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., input lengths, model name)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        """Return string representation of the error.
        
        Returns:
            Error message string
        """
        return self.message
    
    def __repr__(self) -> str:
        """Return detailed representation of the error.
        
        Returns:
            Detailed error representation including context
        """
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
