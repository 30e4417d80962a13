"""
Declarative policy configuration.

Thin frozen dataclasses mapped onto the primitives in composable.policy:

    policy = Policy(
        retry=Retry(times=3, seconds=0.2),
        timeout=Timeout(seconds=1.0, executor=pool),
        on_error=report,
        fallback=lambda _: DEFAULT,
    )
    fetch = policy.build().invoke(load)

Layering, outermost first:
    fallback → on_error → on_value → retry → timeout

So every attempt gets its own deadline, on_error fires once after retries
are exhausted, and the fallback sees the final error.
"""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from datetime import timedelta

from composable._composable import Composable, compose_all
from composable._errors import to_duration
from composable._types import ValueHandler, ErrorHandler, Recover
from composable import policy as P


@dataclass(frozen=True, slots=True)
class Retry:
    """Retry settings. No delay unless seconds or delay is set."""
    times: int = 0
    seconds: float | None = None
    delay: timedelta | None = None

    def build[T](self) -> Composable[T]:
        if self.seconds is None and self.delay is None:
            return P.retry(self.times)
        return P.retry_with_delay(self.times, self.seconds, delay=self.delay)


@dataclass(frozen=True, slots=True)
class Timeout:
    """Per-attempt deadline, run on `executor`."""
    executor: Executor
    seconds: float | None = None
    duration: timedelta | None = None

    @property
    def limit(self) -> timedelta:
        return to_duration(self.seconds, self.duration, what="Timeout")

    def build[T](self) -> Composable[T]:
        return P.timeout(duration=self.limit, executor=self.executor)


@dataclass(frozen=True, slots=True)
class Policy[T]:
    """Full policy; every layer is optional."""
    retry: Retry | None = None
    timeout: Timeout | None = None
    on_value: ValueHandler[T] | None = None
    on_error: ErrorHandler | None = None
    fallback: Recover[T] | None = None

    def build(self) -> Composable[T]:
        """Compile into one Composable. An empty Policy is noop."""
        return compose_all(
            P.catch(self.fallback) if self.fallback is not None else P.noop(),
            P.publish_error(self.on_error) if self.on_error is not None else P.noop(),
            P.publish(self.on_value) if self.on_value is not None else P.noop(),
            self.retry.build() if self.retry is not None else P.noop(),
            self.timeout.build() if self.timeout is not None else P.noop(),
        )


__all__ = ("Retry", "Timeout", "Policy")
