"""File logging handler."""

import logging
from pathlib import Path
from typing import Union, Literal
from logging.handlers import RotatingFileHandler

from ..config import HandlerConfig


class FileHandlerConfig(HandlerConfig):
    """Size-rotated file handler configuration.

    Args:
        enabled: Enable this handler (default: True)
        level: Log level for this handler
        format_str: Custom format string
        filepath: Path to the log file
        max_bytes: Max file size before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        encoding: File encoding (default: utf-8)
    """

    type: Literal["file"] = "file"
    filepath: Union[str, Path]
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5
    encoding: str = "utf-8"


def create_file_handler(config: FileHandlerConfig) -> logging.Handler:
    """Create a rotating file handler, creating parent directories as needed."""
    filepath = Path(config.filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    format_str = config.format_str or "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s"

    handler = RotatingFileHandler(
        filepath,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding=config.encoding,
    )
    handler.setLevel(getattr(logging, config.level.upper()))
    handler.setFormatter(logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler
