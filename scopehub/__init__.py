"""
scopehub - request-scoped resource lifecycle registry

Register resource kinds with open/close pairs, acquire instances during a
short-lived context, and release everything with one call in reverse
acquisition order.

Example:
    ```python
    from scopehub import create_registry

    with create_registry(name="request-42") as registry:
        registry.register("conn", connect, lambda conn: conn.close())
        conn = registry.acquire_singleton("conn", {"dsn": DSN})
        scratch = registry.acquire_singleton("map", "per-request-cache")
    # conn closed, scratch cleared
    ```
"""

from scopehub.errors import (
    RegistryError,
    AlreadyClosedError,
    UnknownResourceError,
    UnserializableOptionsError,
    ReleaseError,
)
from scopehub.registry import (
    ResourceRegistry,
    ResourceKind,
    ReleasePolicy,
    singleton_key,
    register_builtin_kinds,
    BUILTIN_KINDS,
    LIST,
    MAP,
    SET,
)
from scopehub.configs import RegistryConfig, load_config
from scopehub.factory import create_registry
from scopehub.loggings import LOGGER, LogConfig, setup_logger

__version__ = "0.1.0"

__all__ = [
    # Registry
    "ResourceRegistry",
    "ResourceKind",
    "ReleasePolicy",
    "singleton_key",
    "create_registry",
    # Built-in kinds
    "register_builtin_kinds",
    "BUILTIN_KINDS",
    "LIST",
    "MAP",
    "SET",
    # Errors
    "RegistryError",
    "AlreadyClosedError",
    "UnknownResourceError",
    "UnserializableOptionsError",
    "ReleaseError",
    # Config
    "RegistryConfig",
    "load_config",
    # Logging
    "LOGGER",
    "LogConfig",
    "setup_logger",
]
