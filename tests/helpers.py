"""Test helpers (small, reusable doubles).

Keep this file tiny: callbacks that record how they were called, and a
factory for callbacks that raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Recorder:
    """Callable double that records its arguments and returns or raises on cue."""

    result: Any = None
    raises: Exception | None = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.raises is not None:
            raise self.raises
        return self.result

    @property
    def called(self) -> bool:
        return bool(self.calls)


def raising(exc: Exception) -> Callable[..., NoReturn]:
    """Return a callable that raises *exc* whatever it is called with."""

    def _raise(*_args: Any, **_kwargs: Any) -> NoReturn:
        raise exc

    return _raise
