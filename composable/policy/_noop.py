"""
Noop policy.
"""

from __future__ import annotations

from kungfu import identity

from composable._composable import Composable


def noop[T]() -> Composable[T]:
    """Leave the operation unchanged. Useful as a placeholder in a chain."""
    return Composable(identity)


__all__ = ("noop",)
