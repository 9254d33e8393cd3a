"""Minimal thenable used at the promise boundary.

Deferred is a plain promise-like value: it settles at most once and runs
handlers synchronously, in registration order, when it does. Awaiting one
bridges onto the running asyncio loop.

Usage:
    d = Deferred()
    d.then(print)
    d.resolve(42)  # prints 42

    value = await Deferred.resolved("ready")
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from enum import Enum, auto
from typing import Any

from futurelike.interop import as_asyncio_future
from futurelike.protocol import is_thenable

type Handler = Callable[[Any], Any] | None


class DeferredState(Enum):
    """Lifecycle of a Deferred. Transitions only out of PENDING, once."""

    PENDING = auto()
    FULFILLED = auto()
    REJECTED = auto()


class Deferred[T]:
    """Settle-once thenable.

    Handlers passed to then() receive the outcome and produce the outcome of
    the returned child: a return value fulfils it, a raised exception
    rejects it, and a returned thenable is adopted. A missing handler passes
    the outcome through unchanged.
    """

    __slots__ = ("_state", "_outcome", "_callbacks")

    def __init__(self) -> None:
        self._state = DeferredState.PENDING
        self._outcome: Any = None
        self._callbacks: list[tuple[Handler, Handler, Deferred[Any]]] = []

    @classmethod
    def resolved(cls, value: T) -> Deferred[T]:
        """Create an already fulfilled Deferred."""
        deferred: Deferred[T] = cls()
        deferred.resolve(value)
        return deferred

    @classmethod
    def rejected(cls, reason: Any) -> Deferred[Any]:
        """Create an already rejected Deferred."""
        deferred: Deferred[Any] = cls()
        deferred.reject(reason)
        return deferred

    @property
    def state(self) -> DeferredState:
        return self._state

    @property
    def settled(self) -> bool:
        return self._state is not DeferredState.PENDING

    def resolve(self, value: T) -> None:
        """Fulfil with value.

        Raises:
            RuntimeError: If already settled.
        """
        self._settle(DeferredState.FULFILLED, value)

    def reject(self, reason: Any) -> None:
        """Reject with reason.

        Raises:
            RuntimeError: If already settled.
        """
        self._settle(DeferredState.REJECTED, reason)

    def then(
        self,
        on_fulfilled: Callable[[T], Any] | None = None,
        on_rejected: Callable[[Any], Any] | None = None,
    ) -> Deferred[Any]:
        """Register handlers and return a child settled by their outcome.

        Non-callable handlers are ignored. If already settled, the matching
        handler runs immediately.
        """
        child: Deferred[Any] = Deferred()
        fulfil = on_fulfilled if callable(on_fulfilled) else None
        reject = on_rejected if callable(on_rejected) else None
        if self._state is DeferredState.PENDING:
            self._callbacks.append((fulfil, reject, child))
        else:
            self._propagate(fulfil, reject, child)
        return child

    def __await__(self) -> Generator[Any, None, T]:
        return as_asyncio_future(self).__await__()

    def __repr__(self) -> str:
        if self._state is DeferredState.PENDING:
            return "<Deferred pending>"
        return f"<Deferred {self._state.name.lower()}: {self._outcome!r}>"

    def _settle(self, state: DeferredState, outcome: Any) -> None:
        if self._state is not DeferredState.PENDING:
            raise RuntimeError(f"Deferred already {self._state.name.lower()}")
        self._state = state
        self._outcome = outcome
        callbacks, self._callbacks = self._callbacks, []
        for fulfil, reject, child in callbacks:
            self._propagate(fulfil, reject, child)

    def _propagate(self, fulfil: Handler, reject: Handler, child: Deferred[Any]) -> None:
        # A child settled directly by its holder keeps its own outcome, but
        # the handler still runs and later siblings are still reached.
        handler = fulfil if self._state is DeferredState.FULFILLED else reject
        if handler is None:
            if not child.settled:
                child._settle(self._state, self._outcome)
            return
        try:
            result = handler(self._outcome)
        except Exception as e:
            if not child.settled:
                child.reject(e)
            return
        child._adopt(result)

    def _adopt(self, value: Any) -> None:
        """Fulfil with value, or follow it if it is itself thenable."""
        if self.settled:
            return
        if value is self:
            self.reject(TypeError("Deferred cannot adopt itself"))
            return
        if not is_thenable(value):
            self.resolve(value)
            return

        # Foreign thenables may call back more than once; first call wins.
        called = False

        def on_fulfilled(inner: Any) -> None:
            nonlocal called
            if not called:
                called = True
                self._adopt(inner)

        def on_rejected(reason: Any) -> None:
            nonlocal called
            if not called:
                called = True
                if not self.settled:
                    self.reject(reason)

        try:
            value.then(on_fulfilled, on_rejected)
        except Exception as e:
            if not called:
                called = True
                if not self.settled:
                    self.reject(e)
