"""Shared fixtures and utilities for pytest test suite."""

import pytest
from typing import Any, Dict, List

from scopehub import ResourceRegistry, create_registry


# ============================================================
# Common Test Utilities
# ============================================================

class Handle:
    """Stand-in for a non-memory resource (connection, file, buffer)."""

    def __init__(self, kind: str, options: Any = None):
        self.kind = kind
        self.options = options
        self.closed = False

    def __repr__(self):
        return f"Handle({self.kind}, closed={self.closed})"


class ReleaseLog:
    """Records open/close calls so tests can assert on ordering."""

    def __init__(self):
        self.opened: List[Handle] = []
        self.closed: List[Handle] = []

    def kind(self, name: str):
        """Return an (open, close) pair for a kind called name."""
        def open_(options: Any = None) -> Handle:
            handle = Handle(name, options)
            self.opened.append(handle)
            return handle

        def close(handle: Handle) -> None:
            handle.closed = True
            self.closed.append(handle)

        return open_, close


# ============================================================
# Common Fixtures
# ============================================================

@pytest.fixture
def release_log() -> ReleaseLog:
    return ReleaseLog()


@pytest.fixture
def registry(release_log) -> ResourceRegistry:
    """Plain registry with 'conn' and 'cursor' kinds recording into release_log."""
    registry = ResourceRegistry(name="test")
    registry.register("conn", *release_log.kind("conn"))
    registry.register("cursor", *release_log.kind("cursor"))
    return registry


@pytest.fixture
def scratch_registry() -> ResourceRegistry:
    """Registry with the built-in list/map/set kinds."""
    return create_registry(name="scratch")


@pytest.fixture
def counter_kind():
    """The 'counter' kind: opens {"n": 0}, closes by setting n to -1."""
    order: List[Dict[str, int]] = []

    def open_(_options=None):
        return {"n": 0}

    def close(counter):
        counter["n"] = -1
        order.append(counter)

    return open_, close, order
