"""Shared infrastructure for examples."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field


# Errors
@dataclass(frozen=True, slots=True)
class Unavailable(Exception):
    service: str

    def __str__(self) -> str:
        return f"{self.service} unavailable"


# Fake remote service
@dataclass(slots=True)
class FlakyService:
    name: str
    failure_rate: float = 0.6
    latency: float = 0.05
    calls: int = 0
    rng: random.Random = field(default_factory=lambda: random.Random(7))

    def fetch(self) -> str:
        self.calls += 1
        time.sleep(self.latency)
        if self.rng.random() < self.failure_rate:
            print(f"  ✗ {self.name} call #{self.calls} failed")
            raise Unavailable(self.name)
        print(f"  ✓ {self.name} call #{self.calls} ok")
        return f"{self.name}-payload-{self.calls}"


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def setup_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="  · %(name)s: %(message)s")
