"""futurelike: a structural protocol for Futures that may never settle.

Usage:
    from futurelike import done, promise, never, is_never

    class Resolved:
        def __init__(self, value):
            self._value = value

        def done(self, continuation):
            continuation(self._value)

        def promise(self):
            return Deferred.resolved(self._value)

    done(print, Resolved(1))  # prints 1
    promise(Resolved(1))  # <Deferred fulfilled: 1>

    done(print, never)  # prints nothing, ever
    is_never(never)  # True
"""

__version__ = "0.1.0"

# Dispatch
from futurelike.dispatch import done, promise

# Interop
from futurelike.interop import Rejected, as_asyncio_future, to_asyncio

# Protocols
from futurelike.protocol import (
    Continuation,
    FutureLike,
    ProtocolViolationError,
    Thenable,
    is_thenable,
)

# Sentinel
from futurelike.sentinel import Never, is_never, never

# Thenables
from futurelike.thenable import Deferred, DeferredState

__all__ = [
    # Version
    "__version__",
    # Protocols
    "FutureLike",
    "Thenable",
    "Continuation",
    "ProtocolViolationError",
    "is_thenable",
    # Dispatch
    "done",
    "promise",
    # Sentinel
    "Never",
    "never",
    "is_never",
    # Thenables
    "Deferred",
    "DeferredState",
    # Interop
    "Rejected",
    "as_asyncio_future",
    "to_asyncio",
]
