"""
Custom exceptions for RSA16 operations.

Verification failures are not errors: they are reported as ``False``
by the signing API. Exceptions here cover caller mistakes and broken
arithmetic invariants.
"""
from typing import Optional


class RSA16Exception(Exception):
    """Base exception for all RSA16 errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class RSA16PreconditionError(RSA16Exception):
    """Exception raised when a caller passes invalid input."""
    pass


class RSA16KeyError(RSA16PreconditionError):
    """Exception raised when a key context lacks the exponent an operation needs."""
    
    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        missing: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            operation: Name of the rejected operation
            missing: Name of the missing exponent ('e' or 'd')
            error_code: Numeric error code (if available)
        """
        self.operation = operation
        self.missing = missing
        super().__init__(message, error_code)


class RSA16InvariantError(RSA16Exception):
    """Exception raised when an arithmetic invariant is violated.

    Indicates a bug rather than bad input and should not be caught
    and ignored.
    """
    pass
