"""Custom exceptions for plaincache."""

from typing import Optional


class PlainCacheError(Exception):
    """Base exception for all cache errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidArgumentError(PlainCacheError):
    """A key, ttl, bulk input or cache directory is not legal.

    Raised before any file-system access for the offending argument.
    I/O failures never raise this; they are reported as ``False``.

    Attributes:
        argument: The parameter that failed validation (if applicable)
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message, error_code="INVALID_ARGUMENT")
        self.argument = argument
