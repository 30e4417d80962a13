"""Test helpers (small, reusable doubles)."""

from __future__ import annotations

from dataclasses import dataclass, field
import threading


class Boom(Exception):
    """User error raised by failing operations."""


@dataclass
class Calls:
    """Thread-safe call counter usable as an operation or a callback.

    As an operation it fails the first `fail_times` calls (every call when
    None) and then returns `value`. As a callback, `record` stores what it
    was given.
    """

    fail_times: int | None = None
    value: object = 1
    count: int = 0
    seen: list[object] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def _bump(self) -> int:
        with self._lock:
            self.count += 1
            return self.count

    def __call__(self) -> object:
        n = self._bump()
        if self.fail_times is None or n <= self.fail_times:
            raise Boom(f"attempt {n}")
        return self.value

    def record(self, item: object) -> None:
        self._bump()
        self.seen.append(item)
