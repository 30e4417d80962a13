"""
Sync bridge — turn a callback-style async operation into a blocking one.
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta

from kungfu import Result

from composable._errors import OperationTimeoutError, to_duration
from composable._types import AsyncOperation, AsyncCallback, Operation
from composable.lift import unwrap

logger = logging.getLogger(__name__)


class _Slot[T]:
    """One-shot result slot filled by the async callback."""

    __slots__ = ("_lock", "_ready", "_result")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._result: Result[T, BaseException] | None = None

    def deliver(self, result: Result[T, BaseException]) -> None:
        with self._lock:
            if self._result is not None:
                logger.warning("Async callback fired more than once, ignoring %r", result)
                return
            self._result = result
        self._ready.set()

    def wait(self, timeout: float | None) -> Result[T, BaseException] | None:
        self._ready.wait(timeout)
        with self._lock:
            return self._result


def sync[T](
    async_operation: AsyncOperation[T],
    *,
    timeout: float | timedelta | None = None,
) -> Operation[T]:
    """
    Block until `async_operation` delivers its result.

    Each call registers a fresh one-shot callback. The returned operation is
    an ordinary Operation and can be fed to any other policy.

    The callback must fire on a thread other than the one blocked here,
    otherwise the wait never ends. `timeout` bounds the wait and raises
    OperationTimeoutError; by default it waits indefinitely.

    Example:
        def load(callback):
            pool.submit(lambda: callback(Ok(read_remote())))

        value = P.retry(3).invoke(P.sync(load))()
    """
    limit: timedelta | None = None
    if isinstance(timeout, timedelta):
        limit = to_duration(None, timeout, what="sync")
    elif timeout is not None:
        limit = to_duration(timeout, None, what="sync")
    wait_s = None if limit is None else limit.total_seconds()

    def synced() -> T:
        slot: _Slot[T] = _Slot()
        callback: AsyncCallback[T] = slot.deliver
        async_operation(callback)
        result = slot.wait(wait_s)
        if result is None:
            raise OperationTimeoutError(limit or timedelta(0))
        return unwrap(result)

    return synced


__all__ = ("sync",)
