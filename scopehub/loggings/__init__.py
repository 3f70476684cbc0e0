"""Logging setup for scopehub.

Provides the package LOGGER and a small handler registry so loggers can be
built from plain configuration (YAML or dicts).

Example:
    from scopehub.loggings import LogConfig, setup_logger

    logger = setup_logger(LogConfig(
        level="DEBUG",
        handlers=[
            {"type": "console", "level": "INFO"},
            {"type": "file", "filepath": "logs/scopes.log", "level": "DEBUG"},
        ],
    ))
"""

import logging
from typing import Callable, Dict, Optional, Tuple, Type, Any, Union

from .config import LogConfig, HandlerConfig
from .handlers import (
    ConsoleHandlerConfig,
    FileHandlerConfig,
    create_console_handler,
    create_file_handler,
)
from .formatters import format_log_data
from .theme import LOGGING_THEME


# Handler registry: type -> (ConfigClass, FactoryFunction)
_HANDLER_REGISTRY: Dict[str, Tuple[Type[HandlerConfig], Callable[[HandlerConfig], logging.Handler]]] = {}


def register_handler(
    handler_type: str,
    config_class: Type[HandlerConfig],
    factory: Callable[[HandlerConfig], logging.Handler],
) -> None:
    """Register a handler type with its config class and factory.

    Args:
        handler_type: Handler type identifier (e.g., "syslog")
        config_class: Config class for this handler (extends HandlerConfig)
        factory: Function taking the config and returning a logging.Handler
    """
    _HANDLER_REGISTRY[handler_type] = (config_class, factory)


def _parse_handler_config(data: Union[HandlerConfig, Dict[str, Any]]) -> HandlerConfig:
    """Parse a raw dict or base HandlerConfig into the registered config class."""
    if isinstance(data, HandlerConfig) and type(data) is not HandlerConfig:
        return data

    if isinstance(data, HandlerConfig):
        data = data.model_dump()

    handler_type = data.get("type")
    if handler_type in _HANDLER_REGISTRY:
        config_class, _ = _HANDLER_REGISTRY[handler_type]
        return config_class(**data)

    return HandlerConfig(**data)


def _create_handler_from_config(config: HandlerConfig) -> Optional[logging.Handler]:
    if not config.enabled:
        return None

    if config.type in _HANDLER_REGISTRY:
        _, factory = _HANDLER_REGISTRY[config.type]
        return factory(config)

    raise ValueError(f"Unknown handler type: {config.type}")


def remove_handlers(logger: logging.Logger) -> logging.Logger:
    """Remove and close all handlers attached to a logger."""
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    return logger


def setup_logger(config: Optional[LogConfig] = None, replace: bool = False) -> logging.Logger:
    """Setup logger from configuration.

    Args:
        config: Log configuration (default: LogConfig())
        replace: Drop existing handlers first. Without it, a logger that
            already has handlers only gets its level and propagate updated.

    Returns:
        Configured Logger instance
    """
    if config is None:
        config = LogConfig()

    logger = logging.getLogger(config.name)
    logger.setLevel(getattr(logging, config.level.upper()))
    logger.propagate = config.propagate

    if replace:
        remove_handlers(logger)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    for handler_data in config.handlers:
        handler = _create_handler_from_config(_parse_handler_config(handler_data))
        if handler:
            logger.addHandler(handler)

    return logger


register_handler("console", ConsoleHandlerConfig, create_console_handler)
register_handler("file", FileHandlerConfig, create_file_handler)


LOGGER = setup_logger(LogConfig(name="scopehub"))


__all__ = [
    "LOGGER",
    "LogConfig",
    "HandlerConfig",
    "ConsoleHandlerConfig",
    "FileHandlerConfig",
    "setup_logger",
    "register_handler",
    "remove_handlers",
    "format_log_data",
    "LOGGING_THEME",
]
