"""Interface shared by the caption framing strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from encoder_captions.state import FrameResult

if TYPE_CHECKING:
    from encoder_captions.captions.window import CaptionWindow


class CaptionFramer(Protocol):
    def reset(self) -> None:
        """Drop any partially received line; called on every new connection."""

    def feed(self, chunk: bytes, window: CaptionWindow) -> FrameResult:
        """Decode one raw chunk, pushing completed lines into ``window``."""


__all__ = ["CaptionFramer"]
