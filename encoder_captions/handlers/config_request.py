"""Configuration form payload: the layer that clamps ranges before the session sees them."""

from __future__ import annotations

from pydantic import Field, BaseModel, ConfigDict, field_validator

from encoder_captions.state import SessionConfig
from encoder_captions.config.session import (
    PORT_MAX,
    PORT_MIN,
    LINES_MAX,
    LINES_MIN,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LINES,
    SILENCE_INTERVAL_MAX_S,
    SILENCE_INTERVAL_MIN_S,
    DEFAULT_SILENCE_INTERVAL_S,
    DEFAULT_CLEAR_AFTER_SILENCE,
)


class SessionConfigRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=PORT_MIN, le=PORT_MAX)
    lines: int = Field(DEFAULT_LINES, ge=LINES_MIN, le=LINES_MAX)
    clear_after_silence: bool = Field(DEFAULT_CLEAR_AFTER_SILENCE, alias="clearAfterInterval")
    silence_interval_s: float = Field(
        DEFAULT_SILENCE_INTERVAL_S,
        ge=SILENCE_INTERVAL_MIN_S,
        le=SILENCE_INTERVAL_MAX_S,
        alias="silenceInterval",
    )

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        return value.strip()

    @classmethod
    def from_session_config(cls, config: SessionConfig) -> SessionConfigRequest:
        return cls(
            host=config.host,
            port=config.port,
            lines=config.lines,
            clear_after_silence=config.clear_after_silence,
            silence_interval_s=config.silence_interval_s,
        )

    def to_session_config(self) -> SessionConfig:
        return SessionConfig(
            host=self.host,
            port=self.port,
            lines=self.lines,
            clear_after_silence=self.clear_after_silence,
            silence_interval_s=self.silence_interval_s,
        )


__all__ = ["SessionConfigRequest"]
