from __future__ import annotations

import pytest

from encoder_captions.runtime.settings_loader import load_settings

_ENV_NAMES = [
    "CAPTIONS_HOST",
    "CAPTIONS_PORT",
    "CAPTIONS_LINES",
    "CAPTIONS_CLEAR_AFTER_SILENCE",
    "CAPTIONS_SILENCE_INTERVAL_S",
    "CAPTIONS_PROTOCOL_VARIANT",
    "CAPTIONS_RECONNECT_INTERVAL_S",
    "CAPTIONS_KEEP_ALIVE_INTERVAL_S",
    "CAPTIONS_STATUS_DEBOUNCE_S",
    "CAPTIONS_CONNECT_TIMEOUT_S",
    "SERVER_HOST",
    "SERVER_PORT",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.session.host == ""
    assert settings.session.port == 23
    assert settings.session.lines == 2
    assert settings.session.clear_after_silence is True
    assert settings.session.silence_interval_s == 5.0
    assert settings.timing.reconnect_interval_s == 5.0
    assert settings.timing.keep_alive_interval_s == 60.0
    assert settings.timing.status_debounce_s == 1.0
    assert settings.protocol_variant == "sanitize"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAPTIONS_HOST", " 10.0.0.5 ")
    monkeypatch.setenv("CAPTIONS_PORT", "2323")
    monkeypatch.setenv("CAPTIONS_LINES", "4")
    monkeypatch.setenv("CAPTIONS_CLEAR_AFTER_SILENCE", "off")
    monkeypatch.setenv("CAPTIONS_SILENCE_INTERVAL_S", "12.5")
    monkeypatch.setenv("CAPTIONS_PROTOCOL_VARIANT", "carry")
    settings = load_settings()
    assert settings.session.host == "10.0.0.5"
    assert settings.session.port == 2323
    assert settings.session.lines == 4
    assert settings.session.clear_after_silence is False
    assert settings.session.silence_interval_s == 12.5
    assert settings.protocol_variant == "carry"


def test_unparseable_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAPTIONS_PORT", "telnet")
    monkeypatch.setenv("CAPTIONS_RECONNECT_INTERVAL_S", "soon")
    settings = load_settings()
    assert settings.session.port == 23
    assert settings.timing.reconnect_interval_s == 5.0


def test_unknown_variant_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAPTIONS_PROTOCOL_VARIANT", "serial")
    with pytest.raises(ValueError):
        load_settings()


@pytest.mark.parametrize(
    "env,field,expected",
    [
        ("CAPTIONS_PORT", "port", 1),
        ("CAPTIONS_LINES", "lines", 10),
        ("CAPTIONS_SILENCE_INTERVAL_S", "silence_interval_s", 60.0),
    ],
)
def test_out_of_range_session_values_are_clamped(
    monkeypatch: pytest.MonkeyPatch, env: str, field: str, expected: float
) -> None:
    monkeypatch.setenv(env, "0" if field == "port" else "500")
    assert getattr(load_settings().session, field) == expected


def test_low_values_clamp_to_minimum(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAPTIONS_LINES", "-3")
    monkeypatch.setenv("CAPTIONS_SILENCE_INTERVAL_S", "0.1")
    monkeypatch.setenv("CAPTIONS_PORT", "70000")
    session = load_settings().session
    assert session.lines == 1
    assert session.silence_interval_s == 1.0
    assert session.port == 65535
