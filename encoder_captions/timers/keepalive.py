"""Periodic no-op payload that keeps idle encoder connections open."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Awaitable

from encoder_captions.config.protocol import KEEP_ALIVE_PAYLOAD, DEFAULT_KEEP_ALIVE_INTERVAL_S

from .periodic import PeriodicTask

SendFn = Callable[[bytes], Awaitable[bool]]


class KeepAliveEmitter:
    def __init__(
        self,
        send: SendFn,
        *,
        is_connected: Callable[[], bool],
        payload: bytes = KEEP_ALIVE_PAYLOAD,
        interval_s: float = DEFAULT_KEEP_ALIVE_INTERVAL_S,
    ) -> None:
        self._send = send
        self._is_connected = is_connected
        self._payload = payload
        self._timer = PeriodicTask(self._fire, interval_s=interval_s, name="keep-alive")

    @property
    def armed(self) -> bool:
        return self._timer.armed

    def arm(self) -> None:
        self._timer.arm()

    def cancel(self) -> asyncio.Task | None:
        return self._timer.cancel()

    async def _fire(self) -> None:
        if self._is_connected():
            # Failures are not reported; the next data/end/error event decides.
            await self._send(self._payload)


__all__ = ["KeepAliveEmitter", "SendFn"]
