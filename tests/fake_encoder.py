#!/usr/bin/env python3
"""Fake caption encoder for manual end-to-end runs.

Listens on a TCP port, waits for the caption request, then streams lines
terminated with ``%-p``. Point the service at it with ``CAPTIONS_HOST`` and
``CAPTIONS_PORT``.
"""

from __future__ import annotations

import sys
import asyncio
import logging
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tests.utils import FakeEncoder  # noqa: E402
from encoder_captions.config.protocol import ERROR_SENTINEL, LINE_TERMINATOR  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_LINES = [
    "GOOD EVENING AND WELCOME",
    "TO THE SIX OCLOCK NEWS",
    ">> OUR TOP STORY TONIGHT",
]


async def _serve(args: argparse.Namespace) -> int:
    encoder = FakeEncoder(args.host, args.port)
    port = await encoder.start()
    print(f"fake encoder listening on {args.host}:{port}")
    try:
        await encoder.request_seen.wait()
        print("caption request received")
        lines = args.line or DEFAULT_LINES
        for index in range(args.count):
            text = lines[index % len(lines)]
            await encoder.send(f"{text}{LINE_TERMINATOR}".encode())
            logger.debug("sent %r", text)
            await asyncio.sleep(args.interval)
        if args.error:
            await encoder.send(ERROR_SENTINEL.encode())
            print("error sentinel sent")
        if args.hold > 0:
            await asyncio.sleep(args.hold)
    finally:
        await encoder.stop()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve fake caption encoder output")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=2323)
    parser.add_argument("--line", action="append", help="Caption line to send (repeatable)")
    parser.add_argument("--count", type=int, default=10, help="Number of lines to send")
    parser.add_argument("--interval", type=float, default=1.0, help="Seconds between lines")
    parser.add_argument("--error", action="store_true", help="Finish with the device error sentinel")
    parser.add_argument("--hold", type=float, default=10.0, help="Seconds to keep the socket open afterwards")
    parser.add_argument("--debug", action="store_true")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        return asyncio.run(_serve(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
