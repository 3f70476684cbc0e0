"""Request-scoped resource registry.

Basic usage:
    from scopehub.registry import ResourceRegistry

    registry = ResourceRegistry(name="request-42")
    registry.register("file", lambda path: open(path), lambda f: f.close())

    log_file = registry.acquire("file", "/tmp/request.log")
    ...
    registry.close()
"""

from .resource_kind import ResourceKind, ReleasePolicy, OpenFn, CloseFn
from .resource_registry import ResourceRegistry
from .singleton_key import SingletonKey, canonical_options, singleton_key
from .builtins import (
    LIST,
    MAP,
    SET,
    BUILTIN_KINDS,
    register_builtin_kinds,
)

__all__ = [
    "ResourceRegistry",
    "ResourceKind",
    "ReleasePolicy",
    "OpenFn",
    "CloseFn",
    "SingletonKey",
    "canonical_options",
    "singleton_key",
    "LIST",
    "MAP",
    "SET",
    "BUILTIN_KINDS",
    "register_builtin_kinds",
]
