"""Construct Outcomes by running computations that may raise."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from fallible.outcome import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.functions import Computation
    from fallible.outcome import Outcome

log = logging.getLogger(__name__)


def attempt[**P, T](
    computation: Computation[P, T], /, *args: P.args, **kwargs: P.kwargs
) -> Outcome[T]:
    """Run ``computation(*args, **kwargs)`` once and capture how it ended.

    Returns:
        ``Success`` holding the return value, or ``Failure`` holding the
        raised ``Exception``. Nothing is re-raised.

    Raises:
        TypeError: *computation* is not callable.

    Example:
        port = attempt(int, raw_port).filter(lambda p: p > 0).get_or_else_value(8080)
    """
    if not callable(computation):
        raise TypeError(
            f"attempt() requires a callable, got {type(computation).__name__}"
        )
    try:
        return Success(computation(*args, **kwargs))
    except Exception as exc:
        log.debug(
            "attempt(%s) captured %s",
            getattr(computation, "__qualname__", repr(computation)),
            type(exc).__name__,
        )
        return Failure(exc)


def attempting[**P, T](fn: Callable[P, T]) -> Callable[P, Outcome[T]]:
    """Decorate *fn* so each call returns an Outcome instead of raising."""

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        return attempt(fn, *args, **kwargs)

    return wrapper
