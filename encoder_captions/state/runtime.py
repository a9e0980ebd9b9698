"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from encoder_captions.state.settings import AppSettings
    from encoder_captions.runtime.instance import CaptionInstance


@dataclass(slots=True)
class RuntimeDeps:
    instance: CaptionInstance
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            await self.instance.destroy()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
