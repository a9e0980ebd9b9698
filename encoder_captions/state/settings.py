"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """One configuration generation; replaced wholesale on reconfiguration."""

    host: str
    port: int
    lines: int
    clear_after_silence: bool
    silence_interval_s: float


@dataclass(frozen=True, slots=True)
class TimingSettings:
    reconnect_interval_s: float
    keep_alive_interval_s: float
    status_debounce_s: float
    connect_timeout_s: float


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    session: SessionConfig
    timing: TimingSettings
    server: ServerSettings
    protocol_variant: str


__all__ = [
    "AppSettings",
    "ServerSettings",
    "SessionConfig",
    "TimingSettings",
]
