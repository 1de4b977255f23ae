# app_config.py
"""
Central configuration for the wellness assistant app.

- APP_TITLE: browser tab title of the Gradio page.
- SERVER_NAME: host the Gradio server binds to.
- SERVER_PORT: port the Gradio server listens on.
- SHARE: if True, ask Gradio for a public share link.
- LOG_LEVEL: level name passed to log_config.setup_logging().
"""

import os


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


APP_TITLE: str = os.getenv("WELLNESS_APP_TITLE", "Wellness Assistant")

SERVER_NAME: str = os.getenv("WELLNESS_SERVER_NAME", "127.0.0.1")

try:
    SERVER_PORT: int = int(os.getenv("WELLNESS_SERVER_PORT", "7860"))
except ValueError:
    SERVER_PORT = 7860

SHARE: bool = _bool_env("WELLNESS_SHARE", "false")

LOG_LEVEL: str = os.getenv("WELLNESS_LOG_LEVEL", "INFO").strip().upper()
