from .registry_config import RegistryConfig, load_config, CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE

__all__ = [
    "RegistryConfig",
    "load_config",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_FILE",
]
