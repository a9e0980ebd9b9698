"""Best-effort helpers around asyncio stream writers."""

from __future__ import annotations

import asyncio
import logging
import contextlib

logger = logging.getLogger(__name__)


async def safe_send(writer: asyncio.StreamWriter | None, payload: bytes) -> bool:
    if writer is None or writer.is_closing():
        return False
    try:
        writer.write(payload)
        await writer.drain()
    except (ConnectionError, OSError, RuntimeError):
        logger.debug("socket send failed", exc_info=True)
        return False
    return True


def close_writer(writer: asyncio.StreamWriter | None) -> None:
    if writer is None:
        return
    with contextlib.suppress(Exception):
        writer.close()


__all__ = ["close_writer", "safe_send"]
