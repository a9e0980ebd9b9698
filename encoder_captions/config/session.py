"""Caption session configuration (env names, defaults and documented ranges)."""

from __future__ import annotations

ENV_HOST = "CAPTIONS_HOST"
ENV_PORT = "CAPTIONS_PORT"
ENV_LINES = "CAPTIONS_LINES"
ENV_CLEAR_AFTER_SILENCE = "CAPTIONS_CLEAR_AFTER_SILENCE"
ENV_SILENCE_INTERVAL_S = "CAPTIONS_SILENCE_INTERVAL_S"

DEFAULT_HOST: str = ""
DEFAULT_PORT: int = 23
DEFAULT_LINES: int = 2
DEFAULT_CLEAR_AFTER_SILENCE: bool = True
DEFAULT_SILENCE_INTERVAL_S: float = 5.0

# Ranges enforced by the configuration form layer, not by the session itself.
PORT_MIN, PORT_MAX = 1, 65535
LINES_MIN, LINES_MAX = 1, 10
SILENCE_INTERVAL_MIN_S, SILENCE_INTERVAL_MAX_S = 1, 60

__all__ = [
    "DEFAULT_CLEAR_AFTER_SILENCE",
    "DEFAULT_HOST",
    "DEFAULT_LINES",
    "DEFAULT_PORT",
    "DEFAULT_SILENCE_INTERVAL_S",
    "ENV_CLEAR_AFTER_SILENCE",
    "ENV_HOST",
    "ENV_LINES",
    "ENV_PORT",
    "ENV_SILENCE_INTERVAL_S",
    "LINES_MAX",
    "LINES_MIN",
    "PORT_MAX",
    "PORT_MIN",
    "SILENCE_INTERVAL_MAX_S",
    "SILENCE_INTERVAL_MIN_S",
]
