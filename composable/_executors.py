"""
Executor bookkeeping.

Tasks submitted by the library mark their worker thread with the executor
they run on, so a blocking wait on that same executor can be refused.
"""

from __future__ import annotations

import threading
from concurrent.futures import Executor

from composable._types import Operation

# Executors whose task is currently running on this thread.
_running = threading.local()


def active_executors() -> set[int]:
    active: set[int] | None = getattr(_running, "executors", None)
    if active is None:
        active = set()
        _running.executors = active
    return active


def on_executor[T](executor: Executor, operation: Operation[T]) -> Operation[T]:
    """Mark the worker thread as busy for `executor` while `operation` runs."""
    key = id(executor)

    def marked() -> T:
        active = active_executors()
        nested = key in active
        active.add(key)
        try:
            return operation()
        finally:
            if not nested:
                active.discard(key)

    return marked


__all__ = ("active_executors", "on_executor")
