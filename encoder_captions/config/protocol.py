"""Encoder wire protocol constants and connection timing (env names + defaults)."""

from __future__ import annotations

# Sent on every successful connect to ask the encoder for caption data.
REQUEST_CAPTIONS_COMMAND: bytes = b"\x015 F1 O\r\n"

# Caption lines are delimited by this marker; there is no other framing.
LINE_TERMINATOR: str = "%-p"

# A decoded unit equal to this token means the encoder reported an error.
ERROR_SENTINEL: str = "E1"

KEEP_ALIVE_PAYLOAD: bytes = b" \n"

RECV_CHUNK_SIZE: int = 4096

ENV_RECONNECT_INTERVAL_S = "CAPTIONS_RECONNECT_INTERVAL_S"
ENV_KEEP_ALIVE_INTERVAL_S = "CAPTIONS_KEEP_ALIVE_INTERVAL_S"
ENV_STATUS_DEBOUNCE_S = "CAPTIONS_STATUS_DEBOUNCE_S"
ENV_CONNECT_TIMEOUT_S = "CAPTIONS_CONNECT_TIMEOUT_S"
ENV_PROTOCOL_VARIANT = "CAPTIONS_PROTOCOL_VARIANT"

DEFAULT_RECONNECT_INTERVAL_S: float = 5.0
DEFAULT_KEEP_ALIVE_INTERVAL_S: float = 60.0
DEFAULT_STATUS_DEBOUNCE_S: float = 1.0
DEFAULT_CONNECT_TIMEOUT_S: float = 10.0

PROTOCOL_VARIANT_SANITIZE = "sanitize"
PROTOCOL_VARIANT_CARRY = "carry"
DEFAULT_PROTOCOL_VARIANT = PROTOCOL_VARIANT_SANITIZE

__all__ = [
    "DEFAULT_CONNECT_TIMEOUT_S",
    "DEFAULT_KEEP_ALIVE_INTERVAL_S",
    "DEFAULT_PROTOCOL_VARIANT",
    "DEFAULT_RECONNECT_INTERVAL_S",
    "DEFAULT_STATUS_DEBOUNCE_S",
    "ENV_CONNECT_TIMEOUT_S",
    "ENV_KEEP_ALIVE_INTERVAL_S",
    "ENV_PROTOCOL_VARIANT",
    "ENV_RECONNECT_INTERVAL_S",
    "ENV_STATUS_DEBOUNCE_S",
    "ERROR_SENTINEL",
    "KEEP_ALIVE_PAYLOAD",
    "LINE_TERMINATOR",
    "PROTOCOL_VARIANT_CARRY",
    "PROTOCOL_VARIANT_SANITIZE",
    "RECV_CHUNK_SIZE",
    "REQUEST_CAPTIONS_COMMAND",
]
