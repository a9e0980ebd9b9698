"""Protocol variants: one framing strategy plus its session behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable

from encoder_captions.config.protocol import PROTOCOL_VARIANT_CARRY, PROTOCOL_VARIANT_SANITIZE

from .carry import CarryOverFramer
from .framer import CaptionFramer
from .sanitizing import SanitizingFramer


@dataclass(frozen=True, slots=True)
class ProtocolVariant:
    name: str
    framer_factory: Callable[[], CaptionFramer]
    trailing_newline: bool
    keep_alive: bool
    reset_window_on_connect: bool

    def new_framer(self) -> CaptionFramer:
        return self.framer_factory()


SANITIZE_VARIANT = ProtocolVariant(
    name=PROTOCOL_VARIANT_SANITIZE,
    framer_factory=SanitizingFramer,
    trailing_newline=False,
    keep_alive=True,
    reset_window_on_connect=True,
)

CARRY_VARIANT = ProtocolVariant(
    name=PROTOCOL_VARIANT_CARRY,
    framer_factory=CarryOverFramer,
    trailing_newline=True,
    keep_alive=False,
    reset_window_on_connect=False,
)

VARIANTS: dict[str, ProtocolVariant] = {
    SANITIZE_VARIANT.name: SANITIZE_VARIANT,
    CARRY_VARIANT.name: CARRY_VARIANT,
}


def get_variant(name: str) -> ProtocolVariant:
    key = (name or "").strip().lower()
    try:
        return VARIANTS[key]
    except KeyError:
        raise ValueError(f"unknown protocol variant {name!r}; expected one of {sorted(VARIANTS)}") from None


__all__ = ["CARRY_VARIANT", "SANITIZE_VARIANT", "VARIANTS", "ProtocolVariant", "get_variant"]
