"""Single outstanding reconnect timer with a fixed delay."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from encoder_captions.config.protocol import DEFAULT_RECONNECT_INTERVAL_S

logger = logging.getLogger(__name__)


class ReconnectTimer:
    def __init__(self, delay_s: float = DEFAULT_RECONNECT_INTERVAL_S) -> None:
        self._delay_s = max(0.0, float(delay_s))
        self._handle: asyncio.TimerHandle | None = None

    @property
    def delay_s(self) -> float:
        return self._delay_s

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[[], object]) -> None:
        """Replace any pending reconnect; never stacks a second timer."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay_s, self._fire, callback)
        logger.debug("reconnect scheduled in %.1fs", self._delay_s)

    def cancel(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def _fire(self, callback: Callable[[], object]) -> None:
        self._handle = None
        callback()


__all__ = ["ReconnectTimer"]
