"""The canonical Future that never settles.

`never` is created once at import and is never mutated. It is a conforming
Future: continuations registered on it are never called, and its promise
stays pending forever. Other Futures may also never settle; `is_never`
answers only whether a value is this particular instance.

Usage:
    from futurelike import never, is_never

    is_never(never)  # True
    is_never(some_pending_future)  # False
"""

from __future__ import annotations

from typing import Any, ClassVar, final

from futurelike.protocol import Continuation
from futurelike.thenable import Deferred


@final
class Never:
    """Singleton type of `never`.

    Constructing it again returns the existing instance. Copying and
    pickling also preserve identity, and instances accept no attributes.
    """

    __slots__ = ()

    _instance: ClassVar[Never | None] = None

    def __new__(cls) -> Never:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def done(self, continuation: Continuation[Any]) -> None:
        """Accept and discard continuation. It will never be called."""
        return None

    def promise(self) -> Deferred[Any]:
        """Return a fresh Deferred that is never settled."""
        return Deferred()

    def __repr__(self) -> str:
        return "never"

    def __reduce__(self) -> str:
        # Pickle and copy resolve the module-level name back to the singleton
        return "never"


never = Never()


def is_never(value: object) -> bool:
    """Check whether value is the `never` sentinel.

    Total over every input. Compares by identity, so no method of value
    (including __eq__) is ever called.
    """
    return value is never
