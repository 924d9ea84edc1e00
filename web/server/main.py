#!/usr/bin/env python

import logging
import signal
import asyncio

from websockets.exceptions import ConnectionClosed
from websockets.asyncio.server import serve, ServerConnection

from commands import execute_command
from settings import load_settings

logger = logging.getLogger(__name__)


async def handler(websocket: ServerConnection):
    try:
        while True:
            message = await websocket.recv()
            await execute_command(websocket, message)
    except ConnectionClosed:
        pass
    except Exception:
        logger.exception("Error in handler")
    try:
        await websocket.close()
    except Exception:
        logger.exception("Error closing connection")


async def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    async with serve(handler, settings.host, settings.port) as server:
        logger.info("Listening on %s:%d", settings.host or "*", settings.port)
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGTERM, server.close)
        await server.wait_closed()


if __name__ == "__main__":
    asyncio.run(main())
