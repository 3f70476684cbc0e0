"""Console logging handler."""

import sys
import copy
import logging
from typing import Literal

from rich.logging import RichHandler
from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.markup import escape

from ..config import HandlerConfig
from ..theme import LOGGING_THEME


_PLAIN_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s"


class ConsoleHandlerConfig(HandlerConfig):
    """Console handler configuration.

    Args:
        enabled: Enable this handler (default: True)
        level: Log level for this handler
        format_str: Custom format string (ignored if use_rich=True)
        use_rich: Render through rich (default: True)
        stderr: Write to stderr instead of stdout (default: True)
    """

    type: Literal["console"] = "console"
    use_rich: bool = True
    stderr: bool = True


class NamedRichHandler(RichHandler):
    """RichHandler that prefixes each message with the logger name."""

    _LEVEL_STYLES = {
        "DEBUG": "#8b949e",
        "INFO": "white",
        "WARNING": "#d29922",
        "ERROR": "#f85149",
        "CRITICAL": "bold reverse #b81c1c",
    }

    def emit(self, record: logging.LogRecord) -> None:
        style = self._LEVEL_STYLES.get(record.levelname, "muted")

        # Copy so other handlers see the unstyled record. Messages carry
        # user-supplied option values, so they are escaped before markup.
        try:
            message = escape(record.getMessage())
        except Exception:
            self.handleError(record)
            return

        record = copy.copy(record)
        record.msg = f"[{style}]\\[{record.name}][/{style}] {message}"
        record.args = None
        super().emit(record)


def create_console_handler(config: ConsoleHandlerConfig) -> logging.Handler:
    """Create console handler from config.

    Args:
        config: Console handler configuration

    Returns:
        Rich handler, or a plain stream handler when use_rich is off
    """
    level = getattr(logging, config.level.upper())

    if config.use_rich:
        console = Console(
            theme=LOGGING_THEME,
            stderr=config.stderr,
            highlight=False,
        )
        handler = NamedRichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            omit_repeated_times=False,
            highlighter=NullHighlighter(),
        )
        handler.setLevel(level)
        return handler

    handler = logging.StreamHandler(stream=sys.stderr if config.stderr else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.format_str or _PLAIN_FORMAT, datefmt="%H:%M:%S"))
    return handler
