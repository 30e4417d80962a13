"""
Publish policies — observe outcomes without changing them.
"""

from __future__ import annotations

import logging

from composable._composable import Composable
from composable._types import Operation, ValueHandler, ErrorHandler

logger = logging.getLogger(__name__)


def publish[T](on_value: ValueHandler[T]) -> Composable[T]:
    """
    Call `on_value(value)` after every successful run.

    If `on_value` raises, that exception replaces the value. On failure
    `on_value` is never called.
    """
    def transform(operation: Operation[T]) -> Operation[T]:
        def published() -> T:
            value = operation()
            on_value(value)
            return value

        return published

    return Composable(transform)


def publish_error[T](on_error: ErrorHandler) -> Composable[T]:
    """
    Call `on_error(exc)` after every failed run, then re-raise `exc`.

    The original exception always wins: if `on_error` itself raises, the
    secondary failure is logged and attached to the original as a note.

    Example:
        # once, after all retries are exhausted
        P.publish_error(report).compose(P.retry(3))

        # once per attempt
        P.retry(3).compose(P.publish_error(report))
    """
    def transform(operation: Operation[T]) -> Operation[T]:
        def published() -> T:
            try:
                return operation()
            except Exception as exc:
                try:
                    on_error(exc)
                except Exception as secondary:
                    logger.warning(
                        "publish_error callback failed while handling %r",
                        exc,
                        exc_info=True,
                    )
                    exc.add_note(f"publish_error callback failed: {secondary!r}")
                raise

        return published

    return Composable(transform)


__all__ = ("publish", "publish_error")
