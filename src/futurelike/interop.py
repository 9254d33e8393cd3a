"""Conversion from thenables and Futures to asyncio.

The promise boundary is explicit: a thenable becomes an asyncio.Future that
settles on its loop, and rejections surface as exceptions on that future
rather than through any global hook.

Usage:
    value = await to_asyncio(future)

    # never settles, so this times out
    await asyncio.wait_for(to_asyncio(never), timeout=0.1)
"""

from __future__ import annotations

import asyncio
from typing import Any

from futurelike.dispatch import promise
from futurelike.protocol import ProtocolViolationError, is_thenable


class Rejected(Exception):
    """Raised in place of a rejection reason that is not an exception."""

    def __init__(self, reason: Any) -> None:
        super().__init__(f"Thenable rejected with {reason!r}")
        self.reason = reason


def as_asyncio_future(
    thenable: Any, *, loop: asyncio.AbstractEventLoop | None = None
) -> asyncio.Future[Any]:
    """Subscribe to thenable and mirror its outcome onto an asyncio.Future.

    Settlement is marshalled with call_soon_threadsafe, so thenables that
    settle on other threads are safe. If the asyncio future is cancelled
    first, the later outcome is dropped. A thenable that never settles gives
    a future that never completes.

    Args:
        thenable: Any value exposing a callable `then`.
        loop: Loop to bind to. Defaults to the running loop.

    Returns:
        Pending asyncio.Future tracking the thenable.

    Raises:
        ProtocolViolationError: If thenable has no callable `then`.
        RuntimeError: If loop is None and no loop is running.
    """
    if not is_thenable(thenable):
        raise ProtocolViolationError(
            f"Expected a thenable exposing a callable then(), got {type(thenable).__name__}"
        )
    if loop is None:
        loop = asyncio.get_running_loop()
    future = loop.create_future()

    def set_result(value: Any) -> None:
        if not future.done():
            future.set_result(value)

    def set_exception(reason: Any) -> None:
        if not future.done():
            # asyncio refuses StopIteration, so it travels wrapped like a plain reason
            if isinstance(reason, BaseException) and not isinstance(reason, StopIteration):
                future.set_exception(reason)
            else:
                future.set_exception(Rejected(reason))

    def on_fulfilled(value: Any) -> None:
        loop.call_soon_threadsafe(set_result, value)

    def on_rejected(reason: Any) -> None:
        loop.call_soon_threadsafe(set_exception, reason)

    thenable.then(on_fulfilled, on_rejected)
    return future


def to_asyncio(future: Any, *, loop: asyncio.AbstractEventLoop | None = None) -> asyncio.Future[Any]:
    """Dispatch to future.promise() and bridge the result onto asyncio.

    Raises:
        ProtocolViolationError: If future has no callable `promise`, or it
            returned something without a callable `then`.
    """
    return as_asyncio_future(promise(future), loop=loop)
