"""Outcome: the result of a computation that may raise.

An Outcome is exactly one of two immutable variants:

- ``Success(value)``: the computation returned ``value``.
- ``Failure(error)``: the computation raised ``error``.

Combinators that return an Outcome (``map``, ``flat_map``, ``filter``,
``recover``, ``recover_with``) never raise because of their callback: any
exception the callback raises becomes a Failure. ``get``, ``for_each`` and
``or_else_throw`` raise directly to the caller.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and other bare ``BaseException`` subclasses always propagate.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import TYPE_CHECKING, Any, TypeGuard

from fallible.errors import NoMatchingElement, WrappedFailure, describe_exception

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fallible.functions import Binder, Predicate, Supplier, Transform

log = logging.getLogger(__name__)


def _capture[R](exc: Exception, op: str) -> Failure[R]:
    log.debug("%s captured %s", op, type(exc).__name__)
    return Failure(exc)


def _require_outcome[R](result: object, op: str) -> Outcome[R]:
    if is_outcome(result):
        return typing.cast("Outcome[R]", result)
    return _capture(
        TypeError(
            f"{op}() callback must return Success or Failure, "
            f"got {type(result).__name__}"
        ),
        op,
    )


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A computation that produced ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def to_optional(self) -> T | None:
        """Return the value. Use ``list(outcome)`` when ``None`` is a valid value."""
        return self.value

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def map[R](self, fn: Transform[T, R]) -> Outcome[R]:
        """Apply *fn* to the value; a raising *fn* yields a Failure."""
        try:
            return Success(fn(self.value))
        except Exception as exc:
            return _capture(exc, "map")

    def flat_map[R](self, fn: Binder[T, R]) -> Outcome[R]:
        """Return the Outcome produced by *fn*, or a Failure if *fn* raises."""
        try:
            result = fn(self.value)
        except Exception as exc:
            return _capture(exc, "flat_map")
        return _require_outcome(result, "flat_map")

    def filter(self, predicate: Predicate[T]) -> Outcome[T]:
        """Keep this Success if *predicate* holds, else fail with NoMatchingElement."""
        try:
            keep = predicate(self.value)
        except Exception as exc:
            return _capture(exc, "filter")
        if keep:
            return self
        return Failure(
            NoMatchingElement(
                f"Predicate rejected {type(self.value).__name__} value",
                value=self.value,
            )
        )

    def for_each(self, fn: Transform[T, Any]) -> None:
        """Call *fn* with the value for its side effect.

        Raises:
            WrappedFailure: *fn* raised; the original exception is the cause.
        """
        try:
            fn(self.value)
        except Exception as exc:
            raise WrappedFailure(
                exc, message=f"for_each callback raised {describe_exception(exc)}"
            ) from exc

    def get_or_else(self, supplier: Supplier[T]) -> T:
        return self.value

    def get_or_else_value(self, default: T) -> T:
        return self.value

    def or_else(self, supplier: Supplier[Outcome[T]]) -> Outcome[T]:
        return self

    def recover(self, fn: Transform[Exception, T]) -> Outcome[T]:
        return self

    def recover_with(self, fn: Binder[Exception, T]) -> Outcome[T]:
        return self

    def or_else_throw(self, exc: BaseException | type[BaseException]) -> None:
        return None


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T]:
    """A computation that raised ``error``.

    ``T`` is the value type the computation would have produced; it only
    matters to type checkers.
    """

    error: Exception

    def __post_init__(self) -> None:
        if not isinstance(self.error, Exception):
            raise TypeError(
                "Failure requires an Exception instance, "
                f"got {type(self.error).__name__}"
            )

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> T:
        """Raise ``WrappedFailure`` caused by the captured error."""
        raise WrappedFailure(
            self.error,
            hint="Check is_failure() first, or supply a fallback with "
            "get_or_else() or recover().",
        ) from self.error

    def to_optional(self) -> T | None:
        """Return None.

        ``Success(None).to_optional()`` also returns None; use ``list(outcome)``
        to tell the two apart.
        """
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def map[R](self, fn: Transform[T, R]) -> Outcome[R]:
        return typing.cast("Failure[R]", self)

    def flat_map[R](self, fn: Binder[T, R]) -> Outcome[R]:
        return typing.cast("Failure[R]", self)

    def filter(self, predicate: Predicate[T]) -> Outcome[T]:
        return self

    def for_each(self, fn: Transform[T, Any]) -> None:
        return None

    def get_or_else(self, supplier: Supplier[T]) -> T:
        """Return ``supplier()``. Exceptions from *supplier* propagate."""
        return supplier()

    def get_or_else_value(self, default: T) -> T:
        """Return *default* as is; it is never called, even if callable."""
        return default

    def or_else(self, supplier: Supplier[Outcome[T]]) -> Outcome[T]:
        """Return ``supplier()`` as is. Exceptions from *supplier* propagate."""
        return supplier()

    def recover(self, fn: Transform[Exception, T]) -> Outcome[T]:
        """Turn the error into a value; a raising *fn* yields a Failure of its error."""
        try:
            return Success(fn(self.error))
        except Exception as exc:
            return _capture(exc, "recover")

    def recover_with(self, fn: Binder[Exception, T]) -> Outcome[T]:
        """Return the Outcome *fn* builds from the error, or a Failure on raise."""
        try:
            result = fn(self.error)
        except Exception as exc:
            return _capture(exc, "recover_with")
        return _require_outcome(result, "recover_with")

    def or_else_throw(self, exc: BaseException | type[BaseException]) -> None:
        """Raise *exc* as given; an exception class is instantiated first.

        No cause is attached to *exc*; the captured error stays on ``self.error``.
        """
        if isinstance(exc, type):
            exc = exc()
        raise exc


type Outcome[T] = Success[T] | Failure[T]


def is_outcome(obj: object) -> TypeGuard[Outcome[Any]]:
    """Return True when *obj* is a Success or a Failure."""
    return isinstance(obj, Success | Failure)
