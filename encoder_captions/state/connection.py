"""Connection supervisor phases."""

from __future__ import annotations

from enum import Enum


class ConnectionPhase(str, Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"
    RETRY_PENDING = "retry_pending"
    ERROR = "error"
    BAD_CONFIG = "bad_config"


__all__ = ["ConnectionPhase"]
