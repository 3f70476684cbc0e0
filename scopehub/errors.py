"""Exceptions raised by the resource registry."""

from typing import List, Tuple


class RegistryError(Exception):
    """Base class for all registry errors."""


class AlreadyClosedError(RegistryError, RuntimeError):
    """Raised when registering on or acquiring from a closed registry."""

    def __init__(self, registry_name: str, kind_name: str, action: str = "acquire"):
        self.registry_name = registry_name
        self.kind_name = kind_name
        super().__init__(
            f"Cannot {action} '{kind_name}': registry '{registry_name}' is already closed"
        )


class UnknownResourceError(RegistryError, KeyError):
    """Raised when acquiring a resource kind that was never registered."""

    def __init__(self, registry_name: str, kind_name: str):
        self.registry_name = registry_name
        self.kind_name = kind_name
        super().__init__(
            f"Resource kind '{kind_name}' is not registered in registry '{registry_name}'"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UnserializableOptionsError(RegistryError, TypeError):
    """Raised when singleton options cannot be turned into a cache key."""


class ReleaseError(RegistryError):
    """Raised by a best-effort close when one or more releases failed.

    Attributes:
        errors: (kind_name, exception) pairs in the order they were raised
    """

    def __init__(self, registry_name: str, errors: List[Tuple[str, BaseException]]):
        self.registry_name = registry_name
        self.errors = errors
        kinds = ", ".join(name for name, _ in errors)
        super().__init__(
            f"{len(errors)} release(s) failed while closing registry '{registry_name}': {kinds}"
        )
