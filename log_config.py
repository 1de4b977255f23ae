"""Logging setup for the wellness assistant.

app.main() calls setup_logging() with the --log-level flag; library modules
just ask for a named logger and get a basic console config on first use.
"""
import logging

from app_config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist; still honour the requested level.
    logging.getLogger().setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger()
    if not root.handlers:
        setup_logging()
    return logging.getLogger(name)
