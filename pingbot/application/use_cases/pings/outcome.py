"""Value-or-error wrapper for calls whose failure must not stop a batch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a single fallible step."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def attempt(func: Callable[..., T], *args, **kwargs) -> Outcome[T]:
    """Call ``func`` and capture any raised :class:`Exception` as the error."""

    try:
        return Outcome(value=func(*args, **kwargs))
    except Exception as exc:
        return Outcome(error=exc)


__all__ = ["Outcome", "attempt"]
