"""Per-request deadline.

The downstream app runs under asyncio.timeout(); on expiry the handler is
cancelled at whatever cache or repository await it is parked on. Background
invalidations are separate tasks and are not affected. Raw ASGI so the
cancellation reaches the endpoint coroutine itself.
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


async def _send_gateway_timeout(send: Callable, seconds: float) -> None:
    body = json.dumps(
        {
            "error": "GATEWAY_TIMEOUT",
            "message": f"Request exceeded {seconds}s",
            "details": {"timeout_seconds": seconds},
        }
    ).encode()
    await send(
        {
            "type": "http.response.start",
            "status": 504,
            "headers": [(b"content-type", b"application/json")],
        }
    )
    await send({"type": "http.response.body", "body": body, "more_body": False})


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Answer 504 if the app has not finished within timeout_seconds."""
    limit = float(timeout_seconds)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        started = asyncio.Event()

        async def tracking_send(message: dict) -> None:
            if message["type"] == "http.response.start":
                started.set()
            await send(message)

        try:
            async with asyncio.timeout(limit):
                await app(scope, receive, tracking_send)
        except TimeoutError:
            logger.warning("%s %s cancelled after %ss", scope.get("method"), scope.get("path"), limit)
            # Headers already went out; nothing valid left to send.
            if not started.is_set():
                await _send_gateway_timeout(send, limit)

    return asgi_app
