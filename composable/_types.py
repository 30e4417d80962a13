"""
Core types for composable.

Re-exports the result wrapper from kungfu + operation type aliases.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error

# Re-export from combinators
from combinators import LCR

# ═══════════════════════════════════════════════════════════════════════════════
# Operations
# ═══════════════════════════════════════════════════════════════════════════════

type Operation[T] = Callable[[], T]
"""Zero-argument operation that returns T or raises."""

type CountedOperation[T] = Callable[[int], T]
"""Operation that receives the current attempt index (0-based)."""

type OperationTransform[T] = Callable[[Operation[T]], Operation[T]]
"""Maps one operation into another, layering behaviour around it."""

# ═══════════════════════════════════════════════════════════════════════════════
# Callbacks
# ═══════════════════════════════════════════════════════════════════════════════

type AsyncCallback[T] = Callable[[Result[T, BaseException]], None]
"""One-shot callback receiving the outcome of an async operation."""

type AsyncOperation[T] = Callable[[AsyncCallback[T]], None]
"""Arranges for the callback to fire exactly once, later, on another thread."""

type ValueHandler[T] = Callable[[T], object]
"""Side-effect hook receiving a produced value."""

type ErrorHandler = Callable[[Exception], object]
"""Side-effect hook receiving a raised exception."""

type Recover[T] = Callable[[Exception], T]
"""Produces a replacement value from an exception."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Re-exports from combinators
    "LCR",
    # Operations
    "Operation",
    "CountedOperation",
    "OperationTransform",
    # Callbacks
    "AsyncCallback",
    "AsyncOperation",
    "ValueHandler",
    "ErrorHandler",
    "Recover",
)
