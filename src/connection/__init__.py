"""Shared connection registry (lazily created, explicitly released)."""

from .config import ConnectionConfig, get_connection_config, reset_connection_config
from .exceptions import ConnectionRegistryError, InvalidConnectionUrlError
from .models import RegistryState, SharedConnection
from .registry import (
    ConnectionRegistry,
    get_connection_registry,
    reset_connection_registry,
)

__all__ = [
    "ConnectionConfig",
    "get_connection_config",
    "reset_connection_config",
    "ConnectionRegistryError",
    "InvalidConnectionUrlError",
    "RegistryState",
    "SharedConnection",
    "ConnectionRegistry",
    "get_connection_registry",
    "reset_connection_registry",
]
