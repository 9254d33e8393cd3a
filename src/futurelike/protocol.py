"""Protocols for Future-like values.

A value is treated as a Future if it exposes the right capabilities, not
because it inherits from anything. These protocols describe that surface
so it can be checked structurally with isinstance().

Usage:
    from futurelike import FutureLike

    class Resolved:
        def __init__(self, value):
            self._value = value

        def done(self, continuation):
            continuation(self._value)

        def promise(self):
            return Deferred.resolved(self._value)

    assert isinstance(Resolved(1), FutureLike)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

type Continuation[T] = Callable[[T], object]
"""Unary callback invoked with a Future's eventual value."""


class ProtocolViolationError(TypeError):
    """Raised when a value lacks a capability required for dispatch."""

    pass


@runtime_checkable
class Thenable(Protocol):
    """Protocol for promise-like values.

    Anything exposing `then` is thenable. Handlers may be omitted; a
    conforming implementation passes the outcome through unchanged.
    """

    def then(
        self,
        on_fulfilled: Callable[[Any], Any] | None = None,
        on_rejected: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Register handlers for fulfilment and rejection.

        Args:
            on_fulfilled: Called with the value once fulfilled.
            on_rejected: Called with the reason once rejected.

        Returns:
            Implementation-defined, usually another thenable.
        """
        ...


@runtime_checkable
class FutureLike(Protocol):
    """Protocol for deferred values that may never settle.

    Implementations own all scheduling: when continuations run, on which
    thread, and in what order.

    Invariant:
        `done` and `promise` observe the same outcome. A Future that never
        settles never invokes a continuation, and its promise never
        settles either.
    """

    def done(self, continuation: Continuation[Any]) -> Any:
        """Register continuation to be called when the Future settles.

        Args:
            continuation: Unary callback receiving the settled value.

        Returns:
            Implementation-defined. Callers conventionally ignore it.
        """
        ...

    def promise(self) -> Thenable:
        """Convert to a thenable that settles consistently with done()."""
        ...


def is_thenable(value: object) -> bool:
    """Check whether value exposes a callable `then`."""
    return callable(getattr(value, "then", None))
