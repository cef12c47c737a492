"""Shared connection registry.

Holds at most one live SharedConnection. The first acquire() creates it,
later acquire() calls return the same object until release() clears the
slot. A process-wide default registry is available through
get_connection_registry(); callers that want an isolated lifetime can own
a ConnectionRegistry directly.
"""

import logging
import threading
from typing import Optional

from .config import ConnectionConfig, get_connection_config
from .exceptions import InvalidConnectionUrlError
from .models import RegistryState, SharedConnection

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """
    Guards a single shared connection slot.

    Usage:
        registry = ConnectionRegistry()
        conn = registry.acquire("connectToDbUrl.com")
        assert registry.acquire("other.example") is conn  # first url wins
        registry.release()
        assert registry.current() is None

    All slot access happens under one lock, so concurrent acquire() calls
    create exactly one connection.
    """

    def __init__(self, config: Optional[ConnectionConfig] = None):
        self.config = config or get_connection_config()
        self._connection: Optional[SharedConnection] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> RegistryState:
        """Current registry state."""
        with self._lock:
            if self._connection is None:
                return RegistryState.ABSENT
            return RegistryState.PRESENT

    @property
    def is_present(self) -> bool:
        return self.state is RegistryState.PRESENT

    def acquire(self, url: Optional[str] = None) -> SharedConnection:
        """
        Get the shared connection, creating it on first request.

        Args:
            url: Url to bind a new connection to. Defaults to the configured
                database url. Ignored when a connection already exists.

        Returns:
            The live SharedConnection.

        Raises:
            InvalidConnectionUrlError: url is empty or not a string and the
                registry is configured to reject empty urls.
        """
        if url is None:
            url = self.config.database_url

        with self._lock:
            existing = self._connection
            if existing is not None:
                if url != existing.url:
                    logger.debug(
                        f"Connection already bound to {existing.url}, "
                        f"ignoring requested url {url}"
                    )
                else:
                    logger.debug(f"Reusing shared connection: {existing.url}")
                return existing

            if self.config.reject_empty_url and (
                not isinstance(url, str) or not url.strip()
            ):
                logger.warning("Refusing to create connection for empty url")
                raise InvalidConnectionUrlError(url)

            connection = SharedConnection(url)
            self._connection = connection

        logger.info(f"New shared connection created: {url}")
        return connection

    def current(self) -> Optional[SharedConnection]:
        """Get the live connection, or None if absent or released."""
        with self._lock:
            return self._connection

    def release(self) -> None:
        """Clear the shared connection. Releasing an empty registry is a no-op."""
        with self._lock:
            connection = self._connection
            self._connection = None

        if connection is None:
            return
        connection.close()
        logger.info(f"Shared connection released: {connection.url}")


# Global registry instance (singleton)
_registry: Optional[ConnectionRegistry] = None
_registry_lock = threading.Lock()


def get_connection_registry() -> ConnectionRegistry:
    """
    Get or create the process-wide connection registry.

    Returns:
        ConnectionRegistry: The default registry
    """
    global _registry

    if _registry is None:
        with _registry_lock:
            # Double-check after acquiring lock
            if _registry is None:
                _registry = ConnectionRegistry()
    return _registry


def reset_connection_registry() -> None:
    """
    Release and drop the process-wide registry.

    Teardown only (tests, process shutdown). The next get_connection_registry()
    call builds a fresh registry, so a caller still holding the old one is
    outside the single-connection guarantee: drop every reference taken
    before the reset and never acquire through it again.
    """
    global _registry
    with _registry_lock:
        registry = _registry
        _registry = None
    if registry is not None:
        registry.release()
