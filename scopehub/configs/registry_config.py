"""Registry configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from scopehub.loggings import LogConfig
from scopehub.registry.resource_kind import ReleasePolicy
from scopehub.utils.yaml_model import YamlModel

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SCOPEHUB_CONFIG"
DEFAULT_CONFIG_FILE = "scopehub.yaml"


class RegistryConfig(YamlModel):
    """Settings applied by ``create_registry``.

    Args:
        name: Label for registries built from this config
        release_policy: fail_fast (default) or best_effort
        builtin_kinds: Pre-register the list/map/set scratch kinds
        log: Logger configuration applied when the registry is created

    Example YAML:
        name: request
        release_policy: best_effort
        builtin_kinds: true
        log:
          level: DEBUG
          handlers:
            - type: console
    """

    name: str = "scope"
    release_policy: ReleasePolicy = ReleasePolicy.FAIL_FAST
    builtin_kinds: bool = True
    log: Optional[LogConfig] = None


def load_config(path: Optional[Path] = None) -> RegistryConfig:
    """Resolve the registry configuration.

    Looks in order at:
    1. The explicit path argument
    2. SCOPEHUB_CONFIG environment variable
    3. ./scopehub.yaml (current directory)

    Falls back to defaults when no file is found.

    Raises:
        FileNotFoundError: If an explicit path or SCOPEHUB_CONFIG points nowhere
    """
    if path is not None:
        return RegistryConfig.from_yaml_file(path)

    env_config = os.getenv(CONFIG_ENV_VAR)
    if env_config:
        return RegistryConfig.from_yaml_file(Path(env_config))

    if Path(DEFAULT_CONFIG_FILE).exists():
        return RegistryConfig.from_yaml_file(Path(DEFAULT_CONFIG_FILE))

    logger.debug("No %s found, using default registry config", DEFAULT_CONFIG_FILE)
    return RegistryConfig()
