"""Sanitize-and-split framing: a carry buffer cut on the line terminator."""

from __future__ import annotations

import re
import codecs
import logging
from typing import TYPE_CHECKING

from encoder_captions.state import FrameResult
from encoder_captions.config.protocol import ERROR_SENTINEL, LINE_TERMINATOR

if TYPE_CHECKING:
    from encoder_captions.captions.window import CaptionWindow

logger = logging.getLogger(__name__)

_DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9\-_.,\"'>%? ]")
_SPACE_RUN = re.compile(r" {2,}")


class SanitizingFramer:
    """Strategy for encoders whose stream carries control bytes between words.

    Everything outside the caption alphabet is stripped, runs of spaces are
    collapsed, and text accumulates in a carry buffer until a terminator
    arrives. The carry buffer always holds only text after the last cut, so
    the emitted lines do not depend on how TCP split the stream.
    """

    def __init__(self, *, terminator: str = LINE_TERMINATOR, error_sentinel: str = ERROR_SENTINEL) -> None:
        self._terminator = terminator
        self._error_sentinel = error_sentinel
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._carry = ""

    @property
    def carry(self) -> str:
        return self._carry

    def reset(self) -> None:
        self._carry = ""
        self._decoder.reset()

    def feed(self, chunk: bytes, window: CaptionWindow) -> FrameResult:
        if not chunk:
            return FrameResult()

        text = _DISALLOWED_CHARS.sub("", self._decoder.decode(chunk))
        # Collapse across the old carry too: a run can straddle two chunks.
        buffer = _SPACE_RUN.sub(" ", self._carry + text)

        lines: list[str] = []
        offset = 0
        while (index := buffer.find(self._terminator, offset)) != -1:
            lines.append(buffer[offset:index])
            offset = index + len(self._terminator)
        self._carry = buffer[offset:]

        for line in lines:
            window.push(line)

        if self._carry == self._error_sentinel:
            logger.debug("error sentinel left in carry buffer; dropping it")
            self._carry = ""
            # Lines already pushed this chunk stay in the window but are not published.
            return FrameResult(lines=lines, changed=False, device_error=True)

        return FrameResult(lines=lines, changed=bool(lines))


__all__ = ["SanitizingFramer"]
