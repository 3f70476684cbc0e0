"""Registry construction from configuration."""

from typing import Optional

from scopehub.configs import RegistryConfig
from scopehub.loggings import setup_logger
from scopehub.registry import ResourceRegistry, register_builtin_kinds


def create_registry(config: Optional[RegistryConfig] = None, name: Optional[str] = None) -> ResourceRegistry:
    """Create a fresh registry for one context.

    Args:
        config: Registry settings (default: RegistryConfig())
        name: Overrides config.name, e.g. to label a registry with a request id

    Returns:
        An open registry, with the list/map/set kinds unless disabled

    Example:
        registry = create_registry(name=f"request-{request_id}")
        try:
            cache = registry.acquire_singleton("map", "user-cache")
            ...
        finally:
            registry.close()
    """
    if config is None:
        config = RegistryConfig()

    if config.log is not None:
        setup_logger(config.log)

    registry = ResourceRegistry(
        name=name or config.name,
        release_policy=config.release_policy,
    )
    if config.builtin_kinds:
        register_builtin_kinds(registry)
    return registry
