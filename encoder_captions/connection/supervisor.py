"""Connection supervisor: one encoder socket with its timers and caption state."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from functools import partial

from encoder_captions.errors import DeviceError
from encoder_captions.captions import CaptionsFn, CaptionWindow
from encoder_captions.protocol import ProtocolVariant
from encoder_captions.status import StatusFn, StatusReporter
from encoder_captions.timers import ReconnectTimer, SilenceMonitor, KeepAliveEmitter
from encoder_captions.state import (
    StatusReport,
    SessionConfig,
    TimingSettings,
    ConnectionPhase,
    ConnectionStatus,
)
from encoder_captions.config.protocol import (
    ERROR_SENTINEL,
    RECV_CHUNK_SIZE,
    KEEP_ALIVE_PAYLOAD,
    REQUEST_CAPTIONS_COMMAND,
)

from .transport import safe_send, close_writer

logger = logging.getLogger(__name__)


class ConnectionSupervisor:
    """Own the encoder socket lifecycle for one caption session.

    Socket activity is translated into named handlers (``handle_connect``,
    ``handle_data``, ``handle_drain``, ``handle_end``, ``handle_error``) that
    run on the event loop one at a time. At most one connection task and one
    reconnect timer exist at any moment.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        variant: ProtocolVariant,
        timing: TimingSettings,
        on_captions: CaptionsFn,
        on_status: StatusFn,
    ) -> None:
        self._config = config
        self._variant = variant
        self._timing = timing
        self._target: tuple[str, int] = (config.host, config.port)

        self._framer = variant.new_framer()
        self._window = CaptionWindow(
            capacity=config.lines,
            trailing_newline=variant.trailing_newline,
            on_change=on_captions,
        )
        self._status = StatusReporter(
            on_status,
            initial=StatusReport(ConnectionStatus.CONNECTING, "Initialising"),
            debounce_s=timing.status_debounce_s,
        )
        self._silence = SilenceMonitor(
            self._window.clear,
            enabled=config.clear_after_silence,
            interval_s=config.silence_interval_s,
        )
        self._keep_alive = KeepAliveEmitter(
            self._send,
            is_connected=lambda: self.is_connected,
            payload=KEEP_ALIVE_PAYLOAD,
            interval_s=timing.keep_alive_interval_s,
        )
        self._reconnect = ReconnectTimer(timing.reconnect_interval_s)

        self._task: asyncio.Task | None = None
        self._writer: asyncio.StreamWriter | None = None
        self._phase = ConnectionPhase.CONNECTING
        self._last_error: Exception | None = None
        self._destroyed = False

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def variant(self) -> ProtocolVariant:
        return self._variant

    @property
    def phase(self) -> ConnectionPhase:
        return self._phase

    @property
    def status(self) -> StatusReport:
        return self._status.current

    @property
    def window(self) -> CaptionWindow:
        return self._window

    @property
    def captions(self) -> str:
        return self._window.render()

    @property
    def last_error(self) -> Exception | None:
        return self._last_error

    @property
    def reconnect_pending(self) -> bool:
        return self._reconnect.pending

    @property
    def silence_armed(self) -> bool:
        return self._silence.armed

    @property
    def keep_alive_armed(self) -> bool:
        return self._keep_alive.armed

    @property
    def is_connected(self) -> bool:
        writer = self._writer
        return self._phase is ConnectionPhase.CONNECTED and writer is not None and not writer.is_closing()

    def connect(self, host: str, port: int) -> bool:
        """Start one connection attempt, replacing any previous socket and timers."""
        self._teardown()
        self._target = (host, port)
        if self._destroyed:
            return False

        if not host:
            logger.warning("No host configured; not connecting")
            self._phase = ConnectionPhase.BAD_CONFIG
            self._status.update_status(ConnectionStatus.BAD_CONFIG, "No host")
            return False

        self._phase = ConnectionPhase.CONNECTING
        self._status.update_status(ConnectionStatus.CONNECTING, f"Connecting to {host}:{port}")
        coro = self._run(host, port)
        try:
            self._task = asyncio.create_task(coro, name=f"encoder-connection-{host}:{port}")
        except RuntimeError as exc:
            coro.close()
            self._fail_socket_init(exc)
            return False
        return True

    def reconfigure(self, config: SessionConfig) -> bool:
        self._config = config
        self._window.capacity = config.lines
        self._silence.configure(enabled=config.clear_after_silence, interval_s=config.silence_interval_s)
        return self.connect(config.host, config.port)

    async def destroy(self) -> None:
        host, port = self._target
        logger.debug("destroy host=%s port=%s", host, port)
        self._destroyed = True
        tasks = self._teardown()
        self._status.destroy()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def handle_connect(self) -> None:
        host, port = self._target
        self._phase = ConnectionPhase.CONNECTED
        self._framer.reset()
        if self._variant.reset_window_on_connect:
            self._window.clear()
        logger.info("Connected to %s:%s", host, port)
        self._status.update_status(ConnectionStatus.OK, "Connected")

        if not await self._request_captions():
            logger.warning("Caption request failed host=%s port=%s", host, port)
            self._status.update_status(ConnectionStatus.UNKNOWN_WARNING, "Caption request failed")
            return
        logger.debug("Caption request sent")
        self.handle_drain()

    def handle_data(self, chunk: bytes) -> None:
        logger.debug("Data received: %r", chunk)
        self._silence.cancel()
        self._keep_alive.cancel()

        result = self._framer.feed(chunk, self._window)
        if result.changed:
            self._window.publish()

        if result.device_error:
            host, port = self._target
            error = DeviceError(host=host, port=port, sentinel=ERROR_SENTINEL)
            self._last_error = error
            logger.error("Error received: %s", error)
            self._status.update_status(ConnectionStatus.UNKNOWN_ERROR, "Error received")

    def handle_drain(self) -> None:
        self._silence.arm()
        if self._variant.keep_alive:
            self._keep_alive.arm()

    def handle_end(self) -> None:
        host, _port = self._target
        logger.warning("Disconnected from %s", host)
        self._close_socket()
        self._disarm_timers()
        self._status.update_status(ConnectionStatus.DISCONNECTED, f"Disconnected from {host}")
        self._schedule_reconnect()

    def handle_error(self, exc: BaseException) -> None:
        host, port = self._target
        logger.error("Connection error host=%s port=%s: %r", host, port, exc)
        if isinstance(exc, Exception):
            self._last_error = exc
        self._close_socket()
        self._disarm_timers()
        self._phase = ConnectionPhase.ERROR
        self._status.update_status(ConnectionStatus.UNKNOWN_ERROR, str(exc) or type(exc).__name__)
        self._schedule_reconnect()

    async def _run(self, host: str, port: int) -> None:
        timeout = self._timing.connect_timeout_s if self._timing.connect_timeout_s > 0 else None
        try:
            reader, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout=timeout)
        except (OSError, asyncio.TimeoutError) as exc:
            self.handle_error(exc)
            return
        except (ValueError, TypeError, OverflowError) as exc:
            self._fail_socket_init(exc)
            return

        self._writer = writer
        await self.handle_connect()
        try:
            while True:
                chunk = await reader.read(RECV_CHUNK_SIZE)
                if not chunk:
                    self.handle_end()
                    return
                self.handle_data(chunk)
                # Nothing left to process until the next read completes.
                self.handle_drain()
        except OSError as exc:
            self.handle_error(exc)

    def _fail_socket_init(self, exc: Exception) -> None:
        host, port = self._target
        logger.error("Failed to initialize socket host=%s port=%s - %s", host, port, exc)
        self._last_error = exc
        self._phase = ConnectionPhase.ERROR
        self._status.update_status(ConnectionStatus.UNKNOWN_ERROR, f"Failed to initialize socket: {exc}")

    async def _request_captions(self) -> bool:
        if not self.is_connected:
            return False
        logger.debug("Sending: %r", REQUEST_CAPTIONS_COMMAND)
        return await self._send(REQUEST_CAPTIONS_COMMAND)

    async def _send(self, payload: bytes) -> bool:
        return await safe_send(self._writer, payload)

    def _schedule_reconnect(self) -> None:
        if self._destroyed:
            return
        host, port = self._target
        self._reconnect.schedule(partial(self.connect, host, port))
        self._phase = ConnectionPhase.RETRY_PENDING

    def _disarm_timers(self) -> list[asyncio.Task]:
        cancelled = [self._silence.cancel(), self._keep_alive.cancel()]
        return [task for task in cancelled if task is not None]

    def _close_socket(self) -> None:
        writer, self._writer = self._writer, None
        close_writer(writer)

    def _teardown(self) -> list[asyncio.Task]:
        """Synchronously close the socket and cancel the task and every timer."""
        self._reconnect.cancel()
        tasks = self._disarm_timers()
        task, self._task = self._task, None
        if task is not None and not task.done():
            current = None
            with contextlib.suppress(RuntimeError):
                current = asyncio.current_task()
            if task is not current:
                task.cancel()
                tasks.append(task)
        self._close_socket()
        return tasks


__all__ = ["ConnectionSupervisor"]
