"""Frame decoder results (dataclasses only)."""

from __future__ import annotations

from dataclasses import field, dataclass


@dataclass(slots=True)
class FrameResult:
    lines: list[str] = field(default_factory=list)
    changed: bool = False
    device_error: bool = False


__all__ = ["FrameResult"]
