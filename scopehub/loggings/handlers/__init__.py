"""Logging handlers.

Each handler module defines a config class (extends HandlerConfig) and a
factory taking that config and returning a logging.Handler.
"""

from .console import ConsoleHandlerConfig, NamedRichHandler, create_console_handler
from .file import FileHandlerConfig, create_file_handler

__all__ = [
    "ConsoleHandlerConfig",
    "NamedRichHandler",
    "create_console_handler",
    "FileHandlerConfig",
    "create_file_handler",
]
