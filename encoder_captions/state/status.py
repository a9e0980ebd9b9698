"""Externally observable connection status."""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass


class ConnectionStatus(str, Enum):
    CONNECTING = "connecting"
    OK = "ok"
    UNKNOWN_WARNING = "unknown_warning"
    UNKNOWN_ERROR = "unknown_error"
    BAD_CONFIG = "bad_config"
    DISCONNECTED = "disconnected"


@dataclass(frozen=True, slots=True)
class StatusReport:
    status: ConnectionStatus
    message: str = ""


__all__ = ["ConnectionStatus", "StatusReport"]
