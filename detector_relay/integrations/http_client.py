"""
aiohttp session for outbound detector calls.

The lifespan opens one session with initialize() and closes it with close().
All /api/analyze requests share its connection pool. The session's total
timeout (DETECTOR_TIMEOUT_SEC) bounds how long a request waits on the detector.

    async with http_client.request_session() as sess:
        async with sess.post(detector_url, json=body) as response:
            ...
"""

import logging
from contextlib import asynccontextmanager

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 30.0

session: aiohttp.ClientSession | None = None
_timeout = aiohttp.ClientTimeout(total=DEFAULT_TIMEOUT_SEC)


async def initialize(timeout_sec: float = DEFAULT_TIMEOUT_SEC) -> None:
    global session, _timeout
    _timeout = aiohttp.ClientTimeout(total=timeout_sec)
    session = aiohttp.ClientSession(timeout=_timeout)
    logger.info(f"[STARTUP] Detector HTTP session opened (timeout {timeout_sec}s)")


async def close() -> None:
    global session
    if session and not session.closed:
        await session.close()
        session = None
        logger.info("[SHUTDOWN] Detector HTTP session closed")


@asynccontextmanager
async def request_session():
    """
    Yield the lifespan session. Before startup or after shutdown, yield a
    one-off session with the same timeout and close it on exit.
    """
    if session and not session.closed:
        yield session
        return
    one_off = aiohttp.ClientSession(timeout=_timeout)
    try:
        yield one_off
    finally:
        await one_off.close()
