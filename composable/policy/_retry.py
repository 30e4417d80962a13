"""
Retry policies.

Attempts are strictly sequential. After `times` retries the exception from
the last attempt propagates.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta

from composable._composable import Composable
from composable._errors import ContractError, to_duration
from composable._types import Operation, CountedOperation

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# retry_with_count() — Attempt-aware Primitive
# ═══════════════════════════════════════════════════════════════════════════════


def retry_with_count[T](times: int) -> Callable[[CountedOperation[T]], Operation[T]]:
    """
    Build a retry loop over an operation that receives the attempt index.

    The counted operation is called with 0, 1, ... until it succeeds or the
    index reaches `times`; total attempts are at most `times + 1`. Useful for
    custom per-attempt behaviour such as backoff.

    Raises:
        ContractError: `times` is negative or not an int.

    Example:
        fetch = P.retry_with_count(3)(
            lambda attempt: client.get(url, timeout=1 + attempt)
        )
        body = fetch()
    """
    if isinstance(times, bool) or not isinstance(times, int):
        raise ContractError(f"Expected an integer retry count, got {times!r}")
    if times < 0:
        raise ContractError(f"Expected retry count to be >= 0, got {times}")

    def wrap(operation: CountedOperation[T]) -> Operation[T]:
        def retried() -> T:
            attempt = 0
            while True:
                try:
                    return operation(attempt)
                except Exception as exc:
                    if attempt >= times:
                        raise
                    logger.debug(
                        "Attempt %d/%d failed: %r",
                        attempt + 1,
                        times + 1,
                        exc,
                    )
                attempt += 1

        return retried

    return wrap


# ═══════════════════════════════════════════════════════════════════════════════
# retry() / retry_with_delay()
# ═══════════════════════════════════════════════════════════════════════════════


def retry[T](times: int) -> Composable[T]:
    """Retry a failing operation up to `times` more times."""
    counted = retry_with_count(times)

    def transform(operation: Operation[T]) -> Operation[T]:
        return counted(lambda _: operation())

    return Composable(transform)


def retry_with_delay[T](
    times: int,
    seconds: float | None = None,
    *,
    delay: timedelta | None = None,
) -> Composable[T]:
    """
    Retry like `retry`, sleeping before every attempt except the first.

    The sleep blocks the calling thread.

    Example:
        P.retry_with_delay(5, seconds=0.2)
        P.retry_with_delay(5, delay=timedelta(milliseconds=200))
    """
    counted = retry_with_count(times)
    pause = to_duration(seconds, delay, what="retry_with_delay").total_seconds()

    def transform(operation: Operation[T]) -> Operation[T]:
        def attempt(index: int) -> T:
            if index > 0:
                time.sleep(pause)
            return operation()

        return counted(attempt)

    return Composable(transform)


__all__ = ("retry_with_count", "retry", "retry_with_delay")
