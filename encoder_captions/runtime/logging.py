"""Logging initialization."""

from __future__ import annotations

import os
import logging

from encoder_captions.config.logging import LOG_LEVEL, LOG_FORMAT


def configure_logging() -> None:
    # Per-request access lines drown out connection events; opt in explicitly.
    if (os.getenv("SHOW_ACCESS_LOGS") or "").strip().lower() not in {"1", "true", "yes"}:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
