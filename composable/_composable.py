"""
Composable — the composition engine.

A Composable holds exactly one OperationTransform. Composition builds a new
Composable whose transform wraps the argument's transform:

    A.compose(B).invoke(f) == A.invoke(B(f))

The receiver is always the outermost layer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Executor, Future
from dataclasses import dataclass

from kungfu import identity

from composable._executors import on_executor
from composable._types import Operation, OperationTransform, ValueHandler, ErrorHandler

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Composable
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Composable[T]:
    """
    Immutable wrapper around one operation transform.

    Nothing runs at compose/invoke time; every side effect is deferred to
    the moment the produced operation is called.

    Example:
        from composable import policy as P

        fetch = (
            P.publish_error(report)
            .compose(P.retry(3))
            .compose(P.timeout(seconds=2, executor=pool))
            .invoke(load_config)
        )
        config = fetch()
    """

    transform: OperationTransform[T]

    def invoke(self, operation: Operation[T]) -> Operation[T]:
        """Apply the held transform to an operation."""
        return self.transform(operation)

    def compose(self, other: Composable[T] | OperationTransform[T]) -> Composable[T]:
        """Wrap `other` so that this transform's effect sits outside it."""
        inner = other.transform if isinstance(other, Composable) else other

        def composed(operation: Operation[T]) -> Operation[T]:
            return self.invoke(inner(operation))

        return Composable(composed)

    def invoke_async(
        self,
        operation: Operation[T],
        executor: Executor,
        *,
        on_value: ValueHandler[T] | None = None,
        on_error: ErrorHandler | None = None,
        on_complete: Callable[[], object] | None = None,
    ) -> Future[None]:
        """
        Run the composed operation on `executor` and report through callbacks.

        Exactly one of on_value/on_error fires, then on_complete. Without
        on_error the operation's exception lands in the returned future. A
        failing callback is logged and re-raised into the returned future.

        The worker is marked as running on `executor`, so a timeout on the
        same executor inside the operation raises ContractError.
        """
        composed = self.invoke(operation)

        def run() -> None:
            try:
                value = composed()
            except Exception as exc:
                if on_error is None:
                    raise
                _notify(on_error, exc)
            else:
                if on_value is not None:
                    _notify(on_value, value)
            finally:
                if on_complete is not None:
                    on_complete()

        return executor.submit(on_executor(executor, run))


def _notify[V](callback: Callable[[V], object], item: V) -> None:
    try:
        callback(item)
    except Exception:
        logger.warning("invoke_async callback failed", exc_info=True)
        raise


def compose_all[T](*layers: Composable[T] | OperationTransform[T]) -> Composable[T]:
    """
    Fold layers into one Composable, leftmost outermost.

    compose_all() is the identity.
    """
    result: Composable[T] = Composable(identity)
    for layer in layers:
        result = result.compose(layer)
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Composable", "compose_all")
