"""Dispatch functions over any FutureLike value.

These never inspect the concrete type of the target. They look up the one
capability they need, fail fast if it is missing, and forward the call.

Usage:
    from futurelike import done, promise

    done(print, future)  # future.done(print)
    thenable = promise(future)  # future.promise()
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from futurelike.protocol import Continuation, ProtocolViolationError, Thenable, is_thenable

if TYPE_CHECKING:
    from futurelike.config import DispatchSettings


def _capability(future: Any, name: str) -> Callable[..., Any]:
    """Look up a callable capability on future.

    Raises:
        ProtocolViolationError: If future has no callable attribute `name`.
    """
    method = getattr(future, name, None)
    if not callable(method):
        raise ProtocolViolationError(
            f"Expected a Future exposing a callable {name}(), got {type(future).__name__}"
        )
    return method


def done[T](continuation: Continuation[T], future: Any) -> Any:
    """Register continuation on future.

    Forwards exactly one argument, the continuation itself, without wrapping
    or delaying it. Whatever future.done raises propagates to the caller.

    Args:
        continuation: Unary callable invoked with the settled value.
        future: Any value with a callable `done` capability.

    Returns:
        Whatever future.done returns.

    Raises:
        TypeError: If continuation is not callable.
        ProtocolViolationError: If future has no callable `done`.
    """
    if not callable(continuation):
        raise TypeError(f"done() expects a callable continuation, got {type(continuation).__name__}")
    return _capability(future, "done")(continuation)


def promise(future: Any, *, settings: DispatchSettings | None = None) -> Thenable:
    """Convert future to a thenable via its own `promise` capability.

    The result is returned unchanged. Thenability is the Future's
    responsibility; it is only checked when settings.verify_thenables is set,
    and then only with a warning.

    Args:
        future: Any value with a callable `promise` capability.
        settings: Optional dispatch settings.

    Returns:
        Exactly what future.promise() returned.

    Raises:
        ProtocolViolationError: If future has no callable `promise`.
    """
    result = _capability(future, "promise")()
    if settings is not None and settings.verify_thenables and not is_thenable(result):
        warnings.warn(
            f"{type(future).__name__}.promise() returned non-thenable "
            f"{type(result).__name__}",
            stacklevel=2,
        )
    return result
