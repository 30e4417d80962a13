"""
Declarative policy: the same layering, configured as data.
"""

from concurrent.futures import ThreadPoolExecutor

from composable.config import Policy, Retry, Timeout
from examples._infra import FlakyService, banner


def main() -> None:
    service = FlakyService("pricing", failure_rate=0.8)

    with ThreadPoolExecutor(max_workers=2) as pool:
        banner("Policy(retry, timeout, on_error, fallback)")
        policy = Policy(
            retry=Retry(times=3, seconds=0.05),
            timeout=Timeout(executor=pool, seconds=0.5),
            on_value=lambda v: print(f"  → published {v}"),
            on_error=lambda e: print(f"  ! reported {e}"),
            fallback=lambda _: "default-price",
        )

        print(f"\n→ {policy.build().invoke(service.fetch)()}")


if __name__ == "__main__":
    main()
