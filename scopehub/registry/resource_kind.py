"""Resource kind definition."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

OpenFn = Callable[[Any], Any]
CloseFn = Callable[[Any], None]


@dataclass(frozen=True)
class ResourceKind:
    """A named resource type: how to open an instance and how to release it.

    Attributes:
        name: Unique name within a registry
        open: Called with the acquisition options, returns the instance
        close: Called with an instance to release it
    """

    name: str
    open: OpenFn
    close: CloseFn

    def release_callback(self, instance: Any) -> Callable[[], None]:
        """Bind ``close`` to one instance."""
        close = self.close
        return lambda: close(instance)


class ReleasePolicy(str, Enum):
    """How ``close()`` reacts to a release callback raising.

    FAIL_FAST: the first failure propagates and remaining releases are skipped.
    BEST_EFFORT: all releases run; failures are reported together afterwards.
    """

    FAIL_FAST = "fail_fast"
    BEST_EFFORT = "best_effort"
