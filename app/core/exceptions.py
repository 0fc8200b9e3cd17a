"""
Custom exceptions for the Meeting Join Bot.
Each carries the HTTP status it is reported with.
"""

from typing import Any, Dict, Optional
from fastapi import status


class JoinBotException(Exception):
    """Base exception for Meeting Join Bot errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class AuthorizationError(JoinBotException):
    """Raised when the request token does not match the shared secret."""
    status_code = status.HTTP_403_FORBIDDEN


class InvalidRequestError(JoinBotException):
    """Raised when the meeting link is missing or malformed."""
    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedPlatformError(JoinBotException):
    """Raised when the link does not belong to a supported platform."""
    pass


class AutomationError(JoinBotException):
    """Raised when the browser or a page interaction fails."""
    pass


class BrowserProvisioningError(AutomationError):
    """Raised when no usable Chromium binary can be found or installed."""
    pass


class SessionLimitError(JoinBotException):
    """Raised when no browser slot frees up in time."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
