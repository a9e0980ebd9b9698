"""Split-with-carry framing: raw split, first fragment continues the last line."""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING

from encoder_captions.state import FrameResult
from encoder_captions.config.protocol import ERROR_SENTINEL, LINE_TERMINATOR

if TYPE_CHECKING:
    from encoder_captions.captions.window import CaptionWindow


def _split_partial_terminator(text: str, terminator: str) -> tuple[str, str]:
    """Hold back a tail that could be the start of a terminator split across chunks."""
    for size in range(len(terminator) - 1, 0, -1):
        if text.endswith(terminator[:size]):
            return text[:-size], text[-size:]
    return text, ""


class CarryOverFramer:
    """Strategy for encoders that send clean text.

    No sanitization. The caption window itself is the carry: the last window
    line stays open and the first fragment of the next chunk is appended to it.
    A chunk ending on a terminator therefore leaves an empty open line behind.
    """

    def __init__(self, *, terminator: str = LINE_TERMINATOR, error_sentinel: str = ERROR_SENTINEL) -> None:
        self._terminator = terminator
        self._error_sentinel = error_sentinel
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""

    def reset(self) -> None:
        self._pending = ""
        self._decoder.reset()

    def feed(self, chunk: bytes, window: CaptionWindow) -> FrameResult:
        if not chunk:
            return FrameResult()

        text, self._pending = _split_partial_terminator(
            self._pending + self._decoder.decode(chunk),
            self._terminator,
        )
        if not text:
            return FrameResult()

        result = FrameResult()
        fragments = text.split(self._terminator)

        if len(window):
            first = fragments.pop(0)
            if first == self._error_sentinel:
                result.device_error = True
                return result
            if first:
                window.append_to_last(first)
                result.changed = True

        for fragment in fragments:
            if fragment == self._error_sentinel:
                result.device_error = True
                return result
            window.push(fragment)
            result.lines.append(fragment)
            result.changed = True

        return result


__all__ = ["CarryOverFramer"]
