"""Request-scoped resource registry with ordered bulk release."""

import logging
from typing import Any, Callable, Dict, List, Tuple, Union

from ..errors import AlreadyClosedError, ReleaseError, UnknownResourceError
from ..loggings import format_log_data
from .resource_kind import CloseFn, OpenFn, ReleasePolicy, ResourceKind
from .singleton_key import SingletonKey, singleton_key

logger = logging.getLogger(__name__)


class ResourceRegistry:
    """Tracks resources acquired during one short-lived context and releases
    them all at once.

    Resource kinds are registered with an open/close pair. Every acquisition
    records a release callback; ``close()`` runs those callbacks from the
    most recently acquired to the first, so a resource is released before
    anything it may depend on. Singleton acquisition deduplicates instances
    by kind name plus structurally-equal options.

    A registry is meant to be created per context (e.g. per request), used
    from a single flow of control, and closed exactly once. It performs no
    locking.

    Example:
        registry = ResourceRegistry(name="request-42")
        registry.register("conn", open_connection, lambda conn: conn.close())
        registry.register("cursor", lambda conn: conn.cursor(), lambda cur: cur.close())

        conn = registry.acquire_singleton("conn", {"dsn": "postgres://db"})
        cursor = registry.acquire("cursor", conn)
        ...
        registry.close()  # closes cursor, then conn
    """

    def __init__(
        self,
        name: str = "scope",
        release_policy: Union[ReleasePolicy, str] = ReleasePolicy.FAIL_FAST,
    ):
        """Initialize an empty, open registry.

        Args:
            name: Label used in log lines and error messages
            release_policy: Reaction to a failing release during ``close()``
        """
        self.name = name
        self.release_policy = ReleasePolicy(release_policy)
        self._kinds: Dict[str, ResourceKind] = {}
        self._pending: List[Tuple[str, Callable[[], None]]] = []
        self._singletons: Dict[SingletonKey, Any] = {}
        self._closed = False

    # ========================================================================
    # State
    # ========================================================================

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of acquired instances still awaiting release."""
        return len(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    def kinds(self) -> List[str]:
        """Return registered kind names, sorted."""
        return sorted(self._kinds)

    def has(self, name: str) -> bool:
        """Check if a resource kind is registered."""
        return name in self._kinds

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return (
            f"<ResourceRegistry {self.name!r} {state} "
            f"kinds={len(self._kinds)} pending={len(self._pending)}>"
        )

    # ========================================================================
    # Registration
    # ========================================================================

    def register(self, name: str, open: OpenFn, close: CloseFn) -> "ResourceRegistry":
        """Register or replace a resource kind.

        Replacing a kind only affects later acquisitions; instances already
        acquired are still released with the close function they were
        acquired under.

        Args:
            name: Non-empty kind name
            open: Function taking the options and returning an instance
            close: Function taking an instance and releasing it

        Returns:
            This registry, for chaining

        Raises:
            AlreadyClosedError: If the registry is closed
            ValueError: If name is empty or not a string
            TypeError: If open or close is not callable
        """
        if self._closed:
            raise AlreadyClosedError(self.name, name, action="register")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Resource kind name must be a non-empty string, got {name!r}")
        if not callable(open):
            raise TypeError(f"open for resource kind '{name}' must be callable")
        if not callable(close):
            raise TypeError(f"close for resource kind '{name}' must be callable")

        if name in self._kinds:
            logger.debug("%s: Replacing resource kind: %s", self.name, name)
        else:
            logger.debug("%s: Registered resource kind: %s", self.name, name)

        self._kinds[name] = ResourceKind(name=name, open=open, close=close)
        return self

    # ========================================================================
    # Acquisition
    # ========================================================================

    def _get_kind(self, name: str) -> ResourceKind:
        if self._closed:
            raise AlreadyClosedError(self.name, name)

        kind = self._kinds.get(name)
        if kind is None:
            raise UnknownResourceError(self.name, name)
        return kind

    def acquire(self, name: str, options: Any = None) -> Any:
        """Open a new instance of a resource kind and track its release.

        Errors raised by the kind's ``open`` propagate unchanged and leave
        nothing to release.

        Args:
            name: Registered kind name
            options: Passed as-is to the kind's ``open``

        Returns:
            The new resource instance

        Raises:
            AlreadyClosedError: If the registry is closed
            UnknownResourceError: If no kind is registered under name
        """
        kind = self._get_kind(name)

        instance = kind.open(options)
        self._pending.append((name, kind.release_callback(instance)))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s: Acquired %s #%d options=%s",
                self.name, name, len(self._pending), format_log_data(options),
            )
        return instance

    def acquire_singleton(self, name: str, options: Any = None) -> Any:
        """Acquire an instance shared by every call with equal options.

        The first call for a (name, options) pair acquires normally; later
        calls with structurally equal options return that same instance
        without opening again or adding another release.

        Raises:
            AlreadyClosedError: If the registry is closed
            UnknownResourceError: If no kind is registered under name
            UnserializableOptionsError: If options cannot form a cache key
        """
        if self._closed:
            raise AlreadyClosedError(self.name, name)

        key = singleton_key(name, options)
        if key in self._singletons:
            logger.debug("%s: Singleton hit: %s options=%s", self.name, name, key[1])
            return self._singletons[key]

        instance = self.acquire(name, options)
        self._singletons[key] = instance
        return instance

    # ========================================================================
    # Release
    # ========================================================================

    def close(self) -> None:
        """Release every acquired instance, newest first, and shut the registry.

        Calling it again is a no-op once everything has been released.

        Under FAIL_FAST the first release error propagates and releases not
        yet reached stay pending; calling ``close()`` again resumes with
        them. Under BEST_EFFORT every release runs and failures are raised
        together as a ReleaseError. Either way the registry ends up closed
        with its kinds and singleton cache cleared.

        Raises:
            ReleaseError: Under BEST_EFFORT, if any release failed
        """
        if self._pending:
            logger.debug("%s: Releasing %d resource(s)", self.name, len(self._pending))

        errors: List[Tuple[str, BaseException]] = []
        try:
            while self._pending:
                kind_name, release = self._pending.pop()
                if self.release_policy is ReleasePolicy.FAIL_FAST:
                    release()
                    continue

                try:
                    release()
                except Exception as e:
                    logger.warning("%s: Failed to release %s: %s", self.name, kind_name, e)
                    errors.append((kind_name, e))
        finally:
            self._kinds.clear()
            self._singletons.clear()
            if not self._closed:
                logger.debug("%s: Closed", self.name)
            self._closed = True

        if errors:
            raise ReleaseError(self.name, errors) from errors[0][1]

    def __enter__(self) -> "ResourceRegistry":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
