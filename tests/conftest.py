"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from typing import Any

from futurelike import Deferred


class MockFuture:
    """Future whose capabilities fail unless a test overrides them."""

    def done(self, continuation: Any) -> Any:
        raise AssertionError("done() was not expected")

    def promise(self) -> Any:
        raise AssertionError("promise() was not expected")


class ManualFuture:
    """Future settled by hand. done() and promise() observe the same value."""

    def __init__(self) -> None:
        self._continuations: list[Any] = []
        self._deferred: Deferred[Any] = Deferred()

    def done(self, continuation: Any) -> None:
        if self._deferred.settled:
            self._deferred.then(continuation)
        else:
            self._continuations.append(continuation)

    def promise(self) -> Deferred[Any]:
        return self._deferred

    def settle(self, value: Any) -> None:
        continuations, self._continuations = self._continuations, []
        self._deferred.resolve(value)
        for continuation in continuations:
            continuation(value)


class PendingFuture:
    """Independently built Future that never settles, distinct from never."""

    def done(self, continuation: Any) -> None:
        pass

    def promise(self) -> Deferred[Any]:
        return Deferred()


@pytest.fixture
def mock_future() -> MockFuture:
    return MockFuture()


@pytest.fixture
def manual_future() -> ManualFuture:
    return ManualFuture()


@pytest.fixture
def pending_future_cls() -> type[PendingFuture]:
    return PendingFuture
