from .carry import CarryOverFramer
from .framer import CaptionFramer
from .sanitizing import SanitizingFramer
from .variants import CARRY_VARIANT, SANITIZE_VARIANT, ProtocolVariant, get_variant

__all__ = [
    "CARRY_VARIANT",
    "SANITIZE_VARIANT",
    "CaptionFramer",
    "CarryOverFramer",
    "ProtocolVariant",
    "SanitizingFramer",
    "get_variant",
]
