"""
Lift — moving between operations, Results and lazy async computations.

    Operation[T]  ──attempt──▶  Result[T, Exception]
    Result[T, E]  ──from_result──▶  Operation[T]
    Operation[T]  ──from_future──▶  AsyncOperation[T]   (feed to P.sync)
    LCR[T, E]     ──from_lazy──▶  AsyncOperation[T]     (feed to P.sync)
    Operation[T]  ──to_lazy──▶  LCR[T, Exception]       (join combinators flows)
"""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor

from kungfu import Result, Ok, Error, identity
from combinators import lift as L

from composable._types import LCR, Operation, AsyncOperation, AsyncCallback

# ═══════════════════════════════════════════════════════════════════════════════
# Operation <-> Result
# ═══════════════════════════════════════════════════════════════════════════════


def attempt[T](operation: Operation[T]) -> Result[T, Exception]:
    """Run an operation, capturing a raised exception as Error."""
    try:
        return Ok(operation())
    except Exception as exc:
        return Error(exc)


def unwrap[T](result: Result[T, object]) -> T:
    """
    Return the Ok value or raise the Error payload.

    Exceptions are raised as-is. Any other error payload goes through
    Result.unwrap() and surfaces as kungfu.UnwrapError.
    """
    match result:
        case Ok(value):
            return value
        case Error(error) if isinstance(error, BaseException):
            raise error
        case _:
            return result.unwrap()


def from_result[T](result: Result[T, object]) -> Operation[T]:
    """Lift an already-computed Result into an Operation."""
    return lambda: unwrap(result)


# ═══════════════════════════════════════════════════════════════════════════════
# Async sources
# ═══════════════════════════════════════════════════════════════════════════════


def from_future[T](executor: Executor, operation: Operation[T]) -> AsyncOperation[T]:
    """
    Run `operation` on `executor` and deliver its Result to the callback.

    Example:
        value = P.sync(from_future(pool, read_remote))()
    """
    def start(callback: AsyncCallback[T]) -> None:
        executor.submit(lambda: callback(attempt(operation)))

    return start


def from_lazy[T, E](
    computation: LCR[T, E],
    executor: Executor,
) -> AsyncOperation[T]:
    """
    Drive a lazy async computation to completion on a worker thread.

    Each delivery runs the computation in a fresh event loop, so the same
    AsyncOperation can be re-run by retry.

    Example:
        fetch = L.catching_async(lambda: client.get(url), on_error=identity)
        body = P.retry(2).invoke(P.sync(from_lazy(fetch, pool)))()
    """
    async def drive() -> Result[T, E]:
        return await computation

    def run() -> Result[T, E]:
        try:
            return asyncio.run(drive())
        except Exception as exc:
            return Error(exc)

    def start(callback: AsyncCallback[T]) -> None:
        executor.submit(lambda: callback(run()))

    return start


def to_lazy[T](operation: Operation[T]) -> LCR[T, Exception]:
    """
    Expose a blocking operation as a lazy async computation.

    The operation runs in a worker thread; exceptions become Error values.
    """
    return L.catching_async(
        lambda: asyncio.to_thread(operation),
        on_error=identity,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "attempt",
    "unwrap",
    "from_result",
    "from_future",
    "from_lazy",
    "to_lazy",
)
