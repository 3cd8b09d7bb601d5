"""fallible: capture computations that may raise as Success or Failure.

Public API:
    - attempt(): Run a computation and capture its Outcome
    - attempting: Decorator form of attempt()
    - Success / Failure: The two Outcome variants
    - Outcome: Type alias for ``Success[T] | Failure[T]``
    - Computation, Transform, Binder, Predicate, Supplier: Callback type aliases
"""

from __future__ import annotations

import logging

from fallible.errors import (
    FallibleError,
    NoMatchingElement,
    WrappedFailure,
    root_cause,
)
from fallible.factory import attempt, attempting
from fallible.functions import Binder, Computation, Predicate, Supplier, Transform
from fallible.outcome import Failure, Outcome, Success, is_outcome

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Binder",
    "Computation",
    "FallibleError",
    "Failure",
    "NoMatchingElement",
    "Outcome",
    "Predicate",
    "Success",
    "Supplier",
    "Transform",
    "WrappedFailure",
    "__version__",
    "attempt",
    "attempting",
    "is_outcome",
    "root_cause",
]
