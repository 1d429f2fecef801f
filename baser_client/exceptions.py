"""
Exceptions raised by baser-client.

Transport failures (connection errors, non-2xx responses) are not wrapped:
they surface as the ``requests`` exceptions raised by the HTTP layer.
"""

from typing import Optional


class BaserError(Exception):
    """Base exception for baser-client errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class AuthenticationError(BaserError):
    """Login was rejected, or a token was requested before logging in."""


class ResponseFormatError(BaserError):
    """The server answered, but not with the expected envelope."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message, details)
        self.field = field


class ConfigurationError(BaserError):
    """Missing or invalid client configuration."""
