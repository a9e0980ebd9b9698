"""Clear captions after a configurable quiet period."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .periodic import PeriodicTask

logger = logging.getLogger(__name__)


class SilenceMonitor:
    def __init__(self, on_silence: Callable[[], None], *, enabled: bool, interval_s: float) -> None:
        self._on_silence = on_silence
        self._enabled = bool(enabled)
        self._timer = PeriodicTask(self._fire, interval_s=interval_s, name="silence-monitor")

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def armed(self) -> bool:
        return self._timer.armed

    def configure(self, *, enabled: bool, interval_s: float) -> None:
        """Takes effect on the next ``arm()``."""
        self._enabled = bool(enabled)
        self._timer.interval_s = interval_s

    def arm(self) -> None:
        self._timer.cancel()
        if self._enabled:
            self._timer.arm()

    def cancel(self) -> asyncio.Task | None:
        return self._timer.cancel()

    async def _fire(self) -> None:
        logger.debug("no caption data for %.1fs; clearing captions", self._timer.interval_s)
        self._on_silence()


__all__ = ["SilenceMonitor"]
