"""Exception hierarchy for fallible."""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Base exception for all errors raised by fallible itself."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class WrappedFailure(FallibleError):
    """A Failure was accessed as if it held a value.

    Raised by ``get()`` on a Failure and by ``for_each()`` when its callback
    raises. The original exception is both ``cause`` and ``__cause__``.
    """

    def __init__(
        self,
        cause: BaseException,
        *,
        message: str | None = None,
        hint: str | None = None,
    ) -> None:
        if message is None:
            message = describe_exception(cause)
        super().__init__(message, hint=hint)
        self.cause = cause


class NoMatchingElement(FallibleError, LookupError):
    """A ``filter`` predicate rejected the value of a Success."""

    def __init__(
        self, message: str, *, value: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.value = value


def root_cause(exc: BaseException) -> BaseException:
    """Return the innermost exception of *exc*'s cause/context chain.

    Explicit ``__cause__`` links win over implicit ``__context__``; a
    suppressed context is not followed. Cycles stop the walk.
    """
    seen: set[int] = set()
    cur = exc
    while id(cur) not in seen:
        seen.add(id(cur))
        nxt = cur.__cause__
        if nxt is None and not cur.__suppress_context__:
            nxt = cur.__context__
        if nxt is None:
            break
        cur = nxt
    return cur


def describe_exception(exc: BaseException) -> str:
    """Return ``"Type: message"`` for *exc*, tolerating a broken ``__str__``."""
    name = type(exc).__name__
    try:
        text = str(exc)
    except Exception:
        return f"{name}: <unprintable {name}>"
    return f"{name}: {text}" if text else name
