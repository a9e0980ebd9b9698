"""Host-facing caption instance: session lifecycle plus published outputs."""

from __future__ import annotations

import logging

from encoder_captions.protocol import ProtocolVariant
from encoder_captions.connection import ConnectionSupervisor
from encoder_captions.config.variables import CAPTIONS_VARIABLE_ID
from encoder_captions.state import StatusReport, SessionConfig, TimingSettings, ConnectionStatus

logger = logging.getLogger(__name__)


class CaptionInstance:
    """What the host sees: ``init``/``config_updated``/``destroy`` in, variables and status out."""

    def __init__(self, *, variant: ProtocolVariant, timing: TimingSettings, label: str = "encoder-captions") -> None:
        self.label = label
        self._variant = variant
        self._timing = timing
        self._supervisor: ConnectionSupervisor | None = None
        self.variables: dict[str, str] = {CAPTIONS_VARIABLE_ID: ""}
        self.status = StatusReport(ConnectionStatus.CONNECTING, "Initialising")

    @property
    def config(self) -> SessionConfig | None:
        return self._supervisor.config if self._supervisor is not None else None

    @property
    def supervisor(self) -> ConnectionSupervisor | None:
        return self._supervisor

    @property
    def captions(self) -> str:
        return self.variables[CAPTIONS_VARIABLE_ID]

    def init(self, config: SessionConfig) -> None:
        if self._supervisor is None:
            self._supervisor = ConnectionSupervisor(
                config,
                variant=self._variant,
                timing=self._timing,
                on_captions=self._set_captions,
                on_status=self._set_status,
            )
        self.config_updated(config)

    def config_updated(self, config: SessionConfig) -> None:
        if self._supervisor is None:
            self.init(config)
            return
        logger.info(
            "%s: config updated host=%s port=%s lines=%s clear_after_silence=%s silence_interval_s=%s",
            self.label,
            config.host,
            config.port,
            config.lines,
            config.clear_after_silence,
            config.silence_interval_s,
        )
        self._supervisor.reconfigure(config)

    async def destroy(self) -> None:
        logger.debug("destroy label: %s", self.label)
        supervisor, self._supervisor = self._supervisor, None
        if supervisor is not None:
            await supervisor.destroy()

    def set_variable_values(self, values: dict[str, str]) -> None:
        self.variables.update(values)

    def _set_captions(self, text: str) -> None:
        self.set_variable_values({CAPTIONS_VARIABLE_ID: text})

    def _set_status(self, report: StatusReport) -> None:
        self.status = report
        logger.info("%s: status %s %s", self.label, report.status.value, report.message)


__all__ = ["CaptionInstance"]
