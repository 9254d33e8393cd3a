"""Tests for the asyncio conversion boundary.

Why these tests exist:
- The bridge replaces any global unhandled-rejection hook, so errors must surface
- never must convert to an asyncio future that never completes
- Futures settling on worker threads must be safe to await
"""

import asyncio
import threading

import pytest

from futurelike import (
    Deferred,
    ProtocolViolationError,
    Rejected,
    as_asyncio_future,
    never,
    to_asyncio,
)


@pytest.mark.asyncio
async def test_to_asyncio_resolves_with_future_value(manual_future) -> None:
    bridged = to_asyncio(manual_future)
    assert not bridged.done()

    manual_future.settle(7)
    assert await bridged == 7


@pytest.mark.asyncio
async def test_to_asyncio_settled_from_worker_thread(manual_future) -> None:
    bridged = to_asyncio(manual_future)
    worker = threading.Thread(target=manual_future.settle, args=("threaded",))
    worker.start()

    assert await asyncio.wait_for(bridged, timeout=5) == "threaded"
    worker.join()


@pytest.mark.asyncio
async def test_never_does_not_settle() -> None:
    """Why: Adapting never must not produce a spurious result or rejection."""
    bridged = to_asyncio(never)
    with pytest.raises(TimeoutError):
        await asyncio.wait_for(asyncio.shield(bridged), timeout=0.05)
    assert not bridged.done()
    bridged.cancel()


@pytest.mark.asyncio
async def test_rejection_with_exception_is_raised() -> None:
    with pytest.raises(ValueError, match="bad"):
        await as_asyncio_future(Deferred.rejected(ValueError("bad")))


@pytest.mark.asyncio
async def test_rejection_with_plain_reason_is_wrapped() -> None:
    with pytest.raises(Rejected) as exc_info:
        await as_asyncio_future(Deferred.rejected("reason"))
    assert exc_info.value.reason == "reason"


@pytest.mark.asyncio
async def test_cancelled_future_drops_late_outcome() -> None:
    deferred = Deferred()
    bridged = as_asyncio_future(deferred)
    bridged.cancel()

    deferred.resolve("late")
    await asyncio.sleep(0)
    assert bridged.cancelled()


@pytest.mark.asyncio
async def test_explicit_loop_is_used() -> None:
    loop = asyncio.get_running_loop()
    bridged = as_asyncio_future(Deferred.resolved(1), loop=loop)
    assert bridged.get_loop() is loop
    assert await bridged == 1


@pytest.mark.asyncio
async def test_non_thenable_is_rejected(mock_future) -> None:
    mock_future.promise = lambda: 42
    with pytest.raises(ProtocolViolationError, match="then"):
        to_asyncio(mock_future)


def test_requires_running_loop_without_explicit_loop() -> None:
    with pytest.raises(RuntimeError):
        as_asyncio_future(Deferred())


@pytest.mark.asyncio
async def test_rejection_with_stop_iteration_is_wrapped() -> None:
    """Why: asyncio refuses StopIteration; unwrapped, the bridged future would never complete."""
    reason = StopIteration("done early")
    bridged = as_asyncio_future(Deferred.rejected(reason))

    with pytest.raises(Rejected) as exc_info:
        await asyncio.wait_for(bridged, timeout=5)
    assert exc_info.value.reason is reason
