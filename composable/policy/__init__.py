"""
Composable policies.

Namespace: P.*

Examples:
    from composable import policy as P

    P.retry(3).compose(P.timeout(seconds=1, executor=pool))
    P.catch_return(default).compose(P.retry_with_delay(5, seconds=0.5))
    P.sync(async_operation)
"""

from __future__ import annotations

from composable.policy._catch import catch, catch_return
from composable.policy._noop import noop
from composable.policy._publish import publish, publish_error
from composable.policy._retry import retry, retry_with_count, retry_with_delay
from composable.policy._sync import sync
from composable.policy._timeout import timeout

__all__ = (
    "catch",
    "catch_return",
    "noop",
    "publish",
    "publish_error",
    "retry",
    "retry_with_count",
    "retry_with_delay",
    "sync",
    "timeout",
)
