"""
Catch policies — substitute a value for a failure.
"""

from __future__ import annotations

from composable._composable import Composable
from composable._types import Operation, Recover


def catch[T](handler: Recover[T]) -> Composable[T]:
    """
    On failure, return `handler(exc)` instead.

    If the handler raises, that exception propagates. Successful values pass
    through untouched and the handler is never called.

    Example:
        P.catch(lambda e: cached_value).invoke(fetch)
    """
    def transform(operation: Operation[T]) -> Operation[T]:
        def caught() -> T:
            try:
                return operation()
            except Exception as exc:
                return handler(exc)

        return caught

    return Composable(transform)


def catch_return[T](value: T) -> Composable[T]:
    """On failure, return a fixed value."""
    return catch(lambda _: value)


__all__ = ("catch", "catch_return")
