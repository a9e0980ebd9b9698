"""Rolling window of the most recent caption lines."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

logger = logging.getLogger(__name__)

CaptionsFn = Callable[[str], None]


class CaptionWindow:
    """Bounded FIFO of caption lines, rendered oldest first.

    Capacity changes apply on the next push; existing lines are not truncated
    retroactively.
    """

    def __init__(
        self,
        *,
        capacity: int,
        trailing_newline: bool = False,
        on_change: CaptionsFn | None = None,
    ) -> None:
        self._capacity = max(1, int(capacity))
        self._trailing_newline = trailing_newline
        self._on_change = on_change
        self._lines: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self._capacity = max(1, int(value))

    def push(self, line: str) -> None:
        self._lines.append(line)
        while len(self._lines) > self._capacity:
            self._lines.popleft()

    def append_to_last(self, text: str) -> None:
        if not self._lines:
            self._lines.append(text)
            return
        self._lines[-1] += text

    def render(self) -> str:
        if self._trailing_newline:
            return "".join(f"{line}\n" for line in self._lines)
        return "\n".join(self._lines)

    def publish(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self.render())
        except Exception:
            logger.exception("captions publish callback failed")

    def clear(self) -> None:
        self._lines.clear()
        self.publish()


__all__ = ["CaptionWindow", "CaptionsFn"]
