"""Logging theme."""

from rich.theme import Theme


# Only problems stand out; lifecycle chatter stays muted
LOGGING_THEME = Theme({
    "logging.level.debug": "#6e7681",
    "logging.level.info": "white",
    "logging.level.warning": "#d29922",
    "logging.level.error": "#f85149",
    "logging.level.critical": "bold reverse #b81c1c",

    "log.time": "dim white",
    "log.message": "white",
    "log.path": "#6e7681",

    "muted": "#b0b8c1",
})
