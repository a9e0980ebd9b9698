"""Shared error types for the caption bridge."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeviceError(Exception):
    """The encoder sent its error sentinel as a complete decoded unit."""

    host: str
    port: int
    sentinel: str

    def __str__(self) -> str:
        return f"encoder {self.host}:{self.port} reported error {self.sentinel!r}"


__all__ = ["DeviceError"]
