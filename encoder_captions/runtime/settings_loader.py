"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from encoder_captions.state.settings import (
    AppSettings,
    SessionConfig,
    ServerSettings,
    TimingSettings,
)
from encoder_captions.config.server import (
    ENV_SERVER_HOST,
    ENV_SERVER_PORT,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
)
from encoder_captions.config.session import (
    ENV_HOST,
    ENV_PORT,
    ENV_LINES,
    PORT_MAX,
    PORT_MIN,
    LINES_MAX,
    LINES_MIN,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LINES,
    ENV_SILENCE_INTERVAL_S,
    ENV_CLEAR_AFTER_SILENCE,
    DEFAULT_SILENCE_INTERVAL_S,
    SILENCE_INTERVAL_MAX_S,
    SILENCE_INTERVAL_MIN_S,
    DEFAULT_CLEAR_AFTER_SILENCE,
)
from encoder_captions.config.protocol import (
    ENV_STATUS_DEBOUNCE_S,
    ENV_CONNECT_TIMEOUT_S,
    ENV_PROTOCOL_VARIANT,
    ENV_RECONNECT_INTERVAL_S,
    ENV_KEEP_ALIVE_INTERVAL_S,
    DEFAULT_STATUS_DEBOUNCE_S,
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_PROTOCOL_VARIANT,
    DEFAULT_RECONNECT_INTERVAL_S,
    DEFAULT_KEEP_ALIVE_INTERVAL_S,
)
from encoder_captions.protocol.variants import get_variant

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off", "disabled", "disable"}


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _FALSE_VALUES:
        return False
    return v in _TRUE_VALUES


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _load_session_config() -> SessionConfig:
    # Host may legitimately be empty: the session then reports bad_config.
    # Numeric values are clamped to the form ranges the HTTP layer enforces.
    return SessionConfig(
        host=(os.getenv(ENV_HOST) or DEFAULT_HOST).strip(),
        port=int(_clamp(_int_env(ENV_PORT, DEFAULT_PORT), PORT_MIN, PORT_MAX)),
        lines=int(_clamp(_int_env(ENV_LINES, DEFAULT_LINES), LINES_MIN, LINES_MAX)),
        clear_after_silence=_bool_env(ENV_CLEAR_AFTER_SILENCE, DEFAULT_CLEAR_AFTER_SILENCE),
        silence_interval_s=float(
            _clamp(
                _float_env(ENV_SILENCE_INTERVAL_S, DEFAULT_SILENCE_INTERVAL_S),
                SILENCE_INTERVAL_MIN_S,
                SILENCE_INTERVAL_MAX_S,
            )
        ),
    )


def _load_timing_settings() -> TimingSettings:
    return TimingSettings(
        reconnect_interval_s=_float_env(ENV_RECONNECT_INTERVAL_S, DEFAULT_RECONNECT_INTERVAL_S),
        keep_alive_interval_s=_float_env(ENV_KEEP_ALIVE_INTERVAL_S, DEFAULT_KEEP_ALIVE_INTERVAL_S),
        status_debounce_s=_float_env(ENV_STATUS_DEBOUNCE_S, DEFAULT_STATUS_DEBOUNCE_S),
        connect_timeout_s=_float_env(ENV_CONNECT_TIMEOUT_S, DEFAULT_CONNECT_TIMEOUT_S),
    )


def _load_server_settings() -> ServerSettings:
    return ServerSettings(
        host=_str_env(ENV_SERVER_HOST, DEFAULT_SERVER_HOST),
        port=_int_env(ENV_SERVER_PORT, DEFAULT_SERVER_PORT),
    )


def _load_protocol_variant() -> str:
    # Fail at startup rather than on the first connection.
    return get_variant(_str_env(ENV_PROTOCOL_VARIANT, DEFAULT_PROTOCOL_VARIANT)).name


def load_settings() -> AppSettings:
    return AppSettings(
        session=_load_session_config(),
        timing=_load_timing_settings(),
        server=_load_server_settings(),
        protocol_variant=_load_protocol_variant(),
    )


__all__ = ["load_settings"]
