"""
Bridge callback-style and async sources into blocking pipelines.

Level 2: composable.policy.sync, composable.lift
Level 1: combinators.lift, kungfu.Result
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from kungfu import Ok, Error
from combinators import lift as CL
from composable import policy as P, lift as L
from examples._infra import Unavailable, banner


async def lookup_price(sku: str) -> float:
    await asyncio.sleep(0.05)
    return 9.99


def main() -> None:
    with ThreadPoolExecutor(max_workers=2) as pool:
        banner("Callback API → blocking operation")

        def load_profile(callback) -> None:
            pool.submit(lambda: callback(Ok({"id": 42, "name": "Alice"})))

        print(f"\n→ {P.sync(load_profile)()}")

        banner("combinators computation → retried operation")
        price = CL.catching_async(lambda: lookup_price("SKU-1"), on_error=lambda e: Unavailable(str(e)))
        op = P.retry(2).invoke(P.sync(L.from_lazy(price, pool), timeout=1.0))
        print(f"\n→ price {op()}")

        banner("Composed operation → combinators computation")
        result = asyncio.run(L.to_lazy(P.catch_return(0.0).invoke(op))())
        match result:
            case Ok(value):
                print(f"\n✓ {value}")
            case Error(e):
                print(f"\n✗ {e}")


if __name__ == "__main__":
    main()
