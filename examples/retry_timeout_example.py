"""
Retry + timeout + publish around a flaky blocking call.

Level 2: composable.policy
Level 1: kungfu.Result (via composable.lift.attempt)
"""

from concurrent.futures import ThreadPoolExecutor

from kungfu import Ok, Error
from composable import policy as P, lift as L
from examples._infra import FlakyService, banner, setup_logging


def main() -> None:
    setup_logging()
    service = FlakyService("inventory")

    with ThreadPoolExecutor(max_workers=2) as pool:
        banner("publish_error outside retry: reported once")
        fetch = (
            P.publish_error(lambda e: print(f"  ! giving up: {e}"))
            .compose(P.retry_with_delay(4, seconds=0.1))
            .compose(P.timeout(seconds=1.0, executor=pool))
            .invoke(service.fetch)
        )

        match L.attempt(fetch):
            case Ok(value):
                print(f"\n✓ Got {value} after {service.calls} calls")
            case Error(e):
                print(f"\n✗ Failed: {e}")

        banner("catch_return outermost: never fails")
        safe = P.catch_return("cached-payload").compose(P.retry(1)).invoke(service.fetch)
        print(f"\n→ {safe()}")


if __name__ == "__main__":
    main()
