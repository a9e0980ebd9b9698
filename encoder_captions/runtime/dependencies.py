"""Runtime dependency construction (settings + caption instance)."""

from __future__ import annotations

import logging

from encoder_captions.state import RuntimeDeps
from encoder_captions.state.settings import AppSettings
from encoder_captions.protocol.variants import get_variant

from .instance import CaptionInstance
from .settings_loader import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    variant = get_variant(settings.protocol_variant)
    logger.info("runtime: protocol variant %s", variant.name)
    instance = CaptionInstance(variant=variant, timing=settings.timing)
    return RuntimeDeps(instance=instance, settings=settings)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
