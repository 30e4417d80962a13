"""
Timeout policy.

The operation runs on a caller-supplied executor while the calling thread
waits on its future for at most the configured duration.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, wait
from datetime import timedelta

from composable._composable import Composable
from composable._executors import active_executors, on_executor
from composable._errors import ContractError, OperationTimeoutError, to_duration
from composable._types import Operation

logger = logging.getLogger(__name__)


def timeout[T](
    seconds: float | None = None,
    *,
    duration: timedelta | None = None,
    executor: Executor,
) -> Composable[T]:
    """
    Fail with OperationTimeoutError if the operation runs past its deadline.

    Whatever finishes first wins: a completed operation returns its value or
    re-raises its own exception, otherwise the deadline raises. Timed-out
    work is not cancelled; it keeps running and its result is discarded.

    The calling thread must not be a worker of `executor`, since the wait
    would starve the pool it depends on. Such calls raise ContractError.

    Example:
        P.timeout(seconds=2, executor=pool)
        P.timeout(duration=timedelta(minutes=1), executor=pool)
    """
    limit = to_duration(seconds, duration, what="timeout")

    def transform(operation: Operation[T]) -> Operation[T]:
        def timed() -> T:
            if id(executor) in active_executors():
                raise ContractError(
                    "timeout called from a worker of its own executor",
                    hint="run nested timeouts on a separate executor",
                )

            future = executor.submit(on_executor(executor, operation))
            done, _ = wait((future,), timeout=limit.total_seconds())
            if not done:
                logger.debug("Operation timed out after %s", limit)
                raise OperationTimeoutError(limit)
            return future.result()

        return timed

    return Composable(transform)


__all__ = ("timeout",)
