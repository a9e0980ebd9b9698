"""Run the caption host under uvicorn."""

from __future__ import annotations

import uvicorn

from encoder_captions.config.logging import LOG_LEVEL
from encoder_captions.runtime.settings_loader import load_settings


def main() -> int:
    settings = load_settings()
    uvicorn.run(
        "encoder_captions.server:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=LOG_LEVEL.lower(),
    )
    return 0


__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
