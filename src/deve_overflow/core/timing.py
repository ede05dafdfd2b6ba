"""Cooperative delay helpers built on :mod:`asyncio`.

:func:`delay` is the default helper: a coroutine that finishes after the
requested interval and hands back nothing.  It offers no handle of its
own to abort the wait.  Callers that need one race it against another
signal, or use :func:`schedule_delay`, which returns a future that can
be cancelled.
"""

from __future__ import annotations

import asyncio
import logging

logger = logging.getLogger(__name__)


async def delay(milliseconds: float) -> None:
    """Suspend the calling coroutine for at least *milliseconds* ms.

    ``delay(0)`` yields to the event loop once and resumes on the next
    iteration.
    """
    logger.debug("Delaying for %s ms", milliseconds)
    await asyncio.sleep(milliseconds / 1000)


def schedule_delay(milliseconds: float) -> asyncio.Future[None]:
    """Start a delay on the running loop and return its future.

    The future resolves to ``None`` once the interval elapses.
    Cancelling the future also cancels the underlying loop timer.
    Must be called from within a running event loop.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[None] = loop.create_future()

    def _resolve() -> None:
        if not future.done():
            future.set_result(None)

    handle = loop.call_later(max(milliseconds, 0) / 1000, _resolve)

    def _on_done(fut: asyncio.Future[None]) -> None:
        if fut.cancelled():
            logger.debug("Scheduled delay of %s ms cancelled", milliseconds)
            handle.cancel()

    future.add_done_callback(_on_done)
    return future
