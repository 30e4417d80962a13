"""
Exception hierarchy for composable.
"""

from __future__ import annotations

import math
from datetime import timedelta


class ComposableError(Exception):
    """Base exception for errors raised by the library itself."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ContractError(ComposableError, ValueError):
    """A factory or decorated operation was used outside its contract."""


class OperationTimeoutError(ComposableError, TimeoutError):
    """
    The wrapped operation did not finish within its deadline.

    The underlying work is not cancelled and may still complete later.
    """

    def __init__(self, duration: timedelta, *, hint: str | None = None) -> None:
        super().__init__(
            f"Timed out after {duration.total_seconds():g}s",
            hint=hint,
        )
        self.duration = duration


def to_duration(
    seconds: float | None,
    duration: timedelta | None,
    *,
    what: str,
) -> timedelta:
    """Normalize a seconds/timedelta pair into a non-negative timedelta."""
    if seconds is not None and duration is not None:
        raise ContractError(f"{what}: provide seconds or duration, not both")
    if duration is None:
        if seconds is None:
            raise ContractError(f"{what}: must provide seconds or duration")
        if not math.isfinite(seconds):
            raise ContractError(f"{what}: expected a finite duration, got {seconds!r}")
        duration = timedelta(seconds=seconds)
    if duration < timedelta(0):
        raise ContractError(
            f"{what}: expected a non-negative duration, got {duration}",
        )
    return duration


__all__ = (
    "ComposableError",
    "ContractError",
    "OperationTimeoutError",
    "to_duration",
)
