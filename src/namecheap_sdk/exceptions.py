"""
Exception classes for the Namecheap SDK.

All exceptions inherit from NamecheapError and provide structured error
information with codes, messages, and optional details. They are raised
internally and converted into error responses before reaching callers.
"""

from typing import Optional


class NamecheapError(Exception):
    """Base exception for all SDK errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class XmlParseError(NamecheapError):
    """Raised when a response body is not well-formed XML."""

    pass


class TransportError(NamecheapError):
    """Raised when the HTTP exchange with the API endpoint fails."""

    pass


class ConfigurationError(NamecheapError):
    """Raised when client configuration cannot be loaded."""

    pass
