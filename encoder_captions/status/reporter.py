"""Debounced connection status reporting."""

from __future__ import annotations

import time
import logging
from collections.abc import Callable

from encoder_captions.state import StatusReport, ConnectionStatus
from encoder_captions.config.protocol import DEFAULT_STATUS_DEBOUNCE_S

logger = logging.getLogger(__name__)

StatusFn = Callable[[StatusReport], None]
TimeFn = Callable[[], float]


class StatusReporter:
    """Publish status transitions, coalescing identical repeats.

    A report equal to the last emitted one within ``debounce_s`` seconds is
    dropped. After ``destroy()`` nothing is published.
    """

    def __init__(
        self,
        on_status: StatusFn,
        *,
        initial: StatusReport | None = None,
        debounce_s: float = DEFAULT_STATUS_DEBOUNCE_S,
        now_fn: TimeFn | None = None,
    ) -> None:
        self._on_status = on_status
        self._debounce_s = max(0.0, float(debounce_s))
        self._now = now_fn or time.monotonic
        self._current = initial or StatusReport(ConnectionStatus.CONNECTING)
        self._last_emitted: tuple[StatusReport, float] | None = None
        self._released = False
        self._emit(self._current)

    @property
    def current(self) -> StatusReport:
        return self._current

    def update_status(self, status: ConnectionStatus, message: str = "") -> bool:
        if self._released:
            return False

        report = StatusReport(status=status, message=message)
        now = self._now()
        if self._last_emitted is not None:
            last_report, last_at = self._last_emitted
            if last_report == report and (now - last_at) < self._debounce_s:
                return False

        self._current = report
        self._emit(report, now=now)
        return True

    def destroy(self) -> None:
        self._released = True

    def _emit(self, report: StatusReport, *, now: float | None = None) -> None:
        self._last_emitted = (report, self._now() if now is None else now)
        logger.debug("status -> %s %s", report.status.value, report.message)
        try:
            self._on_status(report)
        except Exception:
            logger.exception("status callback failed")


__all__ = ["StatusFn", "StatusReporter", "TimeFn"]
