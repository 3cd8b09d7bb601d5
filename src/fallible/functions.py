"""Callable shapes accepted by ``attempt`` and the Outcome combinators."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fallible.outcome import Outcome

#: A computation that may raise; consumed by ``attempt``.
type Computation[**P, T] = Callable[P, T]

#: One-argument function for ``map``, ``recover`` and ``for_each``.
type Transform[T, R] = Callable[[T], R]

#: One-argument function returning another Outcome (``flat_map``, ``recover_with``).
type Binder[T, R] = Callable[[T], Outcome[R]]

#: Truthiness of the return value decides ``filter``.
type Predicate[T] = Callable[[T], object]

#: Zero-argument fallback for ``get_or_else`` and ``or_else``.
type Supplier[T] = Callable[[], T]
