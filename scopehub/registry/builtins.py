"""Built-in scratch container kinds.

Each kind opens an empty container and clears it in place on release. They
turn a registry into a scratch namespace that is wiped when the context
closes, typically reached through ``acquire_singleton`` with a caller-chosen
discriminator as options:

    seen = registry.acquire_singleton(SET, "visited-urls")
"""

from typing import Any, Dict, List, Set

from .resource_registry import ResourceRegistry

LIST = "list"
MAP = "map"
SET = "set"

BUILTIN_KINDS = (LIST, MAP, SET)


def _open_list(_options: Any) -> List[Any]:
    return []


def _open_map(_options: Any) -> Dict[Any, Any]:
    return {}


def _open_set(_options: Any) -> Set[Any]:
    return set()


def _clear(container: Any) -> None:
    container.clear()


def register_builtin_kinds(registry: ResourceRegistry) -> ResourceRegistry:
    """Register the list, map and set kinds on a registry."""
    return (
        registry
        .register(LIST, _open_list, _clear)
        .register(MAP, _open_map, _clear)
        .register(SET, _open_set, _clear)
    )
