"""Shared connection model and registry state."""

from datetime import datetime, timezone
from enum import Enum


class RegistryState(str, Enum):
    """Whether a registry currently holds a live connection."""
    ABSENT = "absent"
    PRESENT = "present"


class SharedConnection:
    """
    Stand-in for a database connection handle.

    Instances compare by identity; two connections bound to the same url
    are still different connections.
    """

    __slots__ = ("url", "connected", "created_at")

    def __init__(self, url: str):
        self.url = url
        self.connected = self._connect(url)
        self.created_at = datetime.now(timezone.utc)

    @staticmethod
    def _connect(url: str) -> bool:
        # No network activity; binding always succeeds.
        return True

    def close(self) -> None:
        self.connected = False

    def __repr__(self) -> str:
        return f"SharedConnection(url={self.url!r}, connected={self.connected})"
