"""Abort in-flight work when the HTTP client disconnects.

Starlette keeps running a plain endpoint after the peer has gone; this helper
races the use-case coroutine against the ASGI ``http.disconnect`` message and
cancels the coroutine (and the database call it is awaiting) when it arrives.
"""

import asyncio
import logging
from collections.abc import Awaitable
from contextlib import suppress
from typing import TypeVar

from fastapi import Request

from app.domain.exceptions import ClientDisconnectedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _wait_for_disconnect(request: Request) -> None:
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


async def cancel_on_disconnect(request: Request, work: Awaitable[T]) -> T:
    """Await ``work`` unless the client disconnects first.

    Raises:
        ClientDisconnectedError: the client disconnected and ``work`` was cancelled.
    """
    work_task = asyncio.ensure_future(work)
    watcher = asyncio.ensure_future(_wait_for_disconnect(request))
    try:
        done, _ = await asyncio.wait(
            {work_task, watcher}, return_when=asyncio.FIRST_COMPLETED
        )
        if work_task in done:
            return work_task.result()

        work_task.cancel()
        with suppress(asyncio.CancelledError):
            await work_task
        logger.info("%s %s cancelled: client disconnected", request.method, request.url.path)
        raise ClientDisconnectedError()
    finally:
        for task in (work_task, watcher):
            if not task.done():
                task.cancel()
