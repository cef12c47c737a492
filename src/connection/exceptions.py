"""
Custom exceptions for the shared connection registry.
"""

from typing import Optional, Dict, Any


class ConnectionRegistryError(Exception):
    """Base exception for connection registry errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidConnectionUrlError(ConnectionRegistryError):
    """Raised when an empty url is refused (CONNECTION_REJECT_EMPTY_URL)."""

    def __init__(self, url: Optional[str]):
        super().__init__(
            message="Connection url must not be empty",
            details={"url": url},
        )


__all__ = [
    "ConnectionRegistryError",
    "InvalidConnectionUrlError",
]
