"""
Custom exceptions for codeflush.

Configuration errors signal programmer misuse and are raised at the point of
misuse. Transport failures are not wrapped; they reach the caller as raised by
the underlying HTTP library.
"""
from typing import Optional


class HTTPClientException(Exception):
    """Base exception for all codeflush errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class ConfigurationError(HTTPClientException):
    """
    Exception raised for invalid client or request configuration.

    Covers missing required arguments, unknown charsets and URLs that
    cannot be reconstructed. These are never retried.
    """
    pass


class ResponseParseError(HTTPClientException):
    """Exception raised when a response body cannot be parsed."""

    def __init__(
        self,
        message: str,
        content: Optional[bytes] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            content: Raw body that failed to parse (if available)
            error_code: Numeric error code (if available)
        """
        self.content = content
        super().__init__(message, error_code)


def require(value, name: str):
    """Return value, raising ConfigurationError if it is None."""
    if value is None:
        raise ConfigurationError(f"{name} must not be None")
    return value
