"""Example demonstrating a request-scoped ResourceRegistry.

This example shows:
1. Registering resource kinds with open/close pairs
2. Acquiring shared (singleton) and per-call resources
3. Using the built-in scratch containers
4. Reverse-order release when the request ends
5. Best-effort release when a close function fails
"""

from scopehub import LogConfig, RegistryConfig, ReleaseError, ReleasePolicy, create_registry


class FakeConnection:
    def __init__(self, dsn):
        self.dsn = dsn
        print(f"   open  connection {dsn}")

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        print(f"   close connection {self.dsn}")


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        print(f"   open  cursor on {conn.dsn}")

    def close(self):
        print(f"   close cursor on {self.conn.dsn}")


# ============================================================================
# Example 1: One request
# ============================================================================

def handle_request(request_id: int):
    """Everything acquired while handling the request is released at the end."""
    print(f"Request {request_id}")

    with create_registry(name=f"request-{request_id}") as registry:
        registry.register("db", lambda options: FakeConnection(options["dsn"]), FakeConnection.close)
        registry.register("cursor", lambda conn: conn.cursor(), FakeCursor.close)

        conn = registry.acquire_singleton("db", {"dsn": "postgres://primary"})
        same_conn = registry.acquire_singleton("db", {"dsn": "postgres://primary"})
        assert conn is same_conn

        registry.acquire("cursor", conn)
        registry.acquire("cursor", conn)

        seen = registry.acquire_singleton("set", "seen-users")
        seen.update({"alice", "bob"})
        print(f"   scratch set: {sorted(seen)}")

    print(f"   scratch set after close: {seen}")
    print()


# ============================================================================
# Example 2: Best-effort release
# ============================================================================

def example_best_effort():
    """A failing close does not stop the remaining releases."""
    print("Best-effort release")

    config = RegistryConfig(
        name="batch",
        release_policy=ReleasePolicy.BEST_EFFORT,
        log=LogConfig(level="WARNING"),
    )
    registry = create_registry(config)

    def flaky_close(name):
        if name == "b":
            raise OSError(f"{name} already closed by peer")
        print(f"   released {name}")

    registry.register("socket", lambda name: name, flaky_close)
    for name in ("a", "b", "c"):
        registry.acquire("socket", name)

    try:
        registry.close()
    except ReleaseError as e:
        print(f"   {e}")
    print()


if __name__ == "__main__":
    handle_request(1)
    handle_request(2)
    example_best_effort()
