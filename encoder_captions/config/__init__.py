"""Configuration module exports (env names, defaults and wire constants only)."""

from .protocol import (
    ERROR_SENTINEL,
    LINE_TERMINATOR,
    KEEP_ALIVE_PAYLOAD,
    REQUEST_CAPTIONS_COMMAND,
)

__all__ = [
    "ERROR_SENTINEL",
    "KEEP_ALIVE_PAYLOAD",
    "LINE_TERMINATOR",
    "REQUEST_CAPTIONS_COMMAND",
]
