"""Logging configuration models."""

from typing import Optional, List, Union, Dict, Any

from pydantic import BaseModel, Field, ConfigDict


class HandlerConfig(BaseModel):
    """Base handler configuration.

    The 'type' field selects the config class and factory registered
    through ``register_handler``.

    Args:
        type: Handler type identifier (e.g., "console", "file")
        enabled: Enable this handler (default: True)
        level: Log level for this handler (default: DEBUG)
        format_str: Custom format string
    """

    model_config = ConfigDict(extra="allow")

    type: str
    enabled: bool = True
    level: str = "DEBUG"
    format_str: Optional[str] = None


class LogConfig(BaseModel):
    """Logger configuration.

    Handlers may be plain dicts with a 'type' key (as read from YAML) or
    HandlerConfig instances.

    Args:
        name: Logger name (default: "scopehub")
        level: Logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        handlers: Handler configurations
        propagate: Propagate to parent loggers (default: False)

    Example:
        config = LogConfig(
            level="DEBUG",
            handlers=[
                {"type": "console", "level": "INFO"},
                {"type": "file", "filepath": "logs/scopes.log"},
            ]
        )
        logger = setup_logger(config)
    """

    name: str = "scopehub"
    level: str = "WARNING"
    handlers: List[Union[HandlerConfig, Dict[str, Any]]] = Field(
        default_factory=lambda: [{"type": "console"}]
    )
    propagate: bool = False
