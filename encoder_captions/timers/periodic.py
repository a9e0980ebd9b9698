"""Cancellable repeating asyncio task."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Awaitable

logger = logging.getLogger(__name__)

ActionFn = Callable[[], Awaitable[None]]


class PeriodicTask:
    """Run ``action`` every ``interval_s`` seconds until cancelled.

    ``arm()`` always replaces the previous run, so a timer never double-fires.
    ``cancel()`` is synchronous and hands back the cancelled task so an owner
    can await it during teardown.
    """

    def __init__(self, action: ActionFn, *, interval_s: float, name: str) -> None:
        self._action = action
        self._interval_s = float(interval_s)
        self._name = name
        self._task: asyncio.Task | None = None

    @property
    def interval_s(self) -> float:
        return self._interval_s

    @interval_s.setter
    def interval_s(self, value: float) -> None:
        self._interval_s = float(value)

    @property
    def armed(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self) -> None:
        self.cancel()
        if self._interval_s <= 0:
            return
        self._task = asyncio.create_task(self._run(), name=self._name)

    def cancel(self) -> asyncio.Task | None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
        return task

    async def _run(self) -> None:
        try:
            while True:
                await asyncio.sleep(self._interval_s)
                await self._action()
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("%s timer exiting due to unexpected error", self._name, exc_info=True)


__all__ = ["ActionFn", "PeriodicTask"]
