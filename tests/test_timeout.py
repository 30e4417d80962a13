from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
import threading
import time

import pytest

from composable import ContractError, OperationTimeoutError, policy as P
from tests.helpers import Boom, Calls

pytestmark = pytest.mark.unit

TIMEOUT = 0.2


def sleeping(seconds: float, value: int):
    def op() -> int:
        time.sleep(seconds)
        return value

    return op


@pytest.mark.slow
def test_timeout_slow_operation_fails(executor: ThreadPoolExecutor) -> None:
    wrapped = P.timeout(TIMEOUT, executor=executor).invoke(sleeping(TIMEOUT * 2, 1))

    with pytest.raises(OperationTimeoutError) as info:
        wrapped()

    assert info.value.duration == timedelta(seconds=TIMEOUT)
    assert isinstance(info.value, TimeoutError)
    assert str(info.value) == "Timed out after 0.2s"


@pytest.mark.slow
def test_timeout_fast_operation_returns_value(executor: ThreadPoolExecutor) -> None:
    wrapped = P.timeout(TIMEOUT, executor=executor).invoke(sleeping(TIMEOUT / 2, 2))
    assert wrapped() == 2


def test_timeout_propagates_operation_error(executor: ThreadPoolExecutor) -> None:
    with pytest.raises(Boom, match="attempt 1"):
        P.timeout(5, executor=executor).invoke(Calls())()


def test_timeout_keeps_operation_own_timeout_error(executor: ThreadPoolExecutor) -> None:
    def op() -> int:
        raise TimeoutError("upstream")

    with pytest.raises(TimeoutError, match="upstream") as info:
        P.timeout(5, executor=executor).invoke(op)()
    assert not isinstance(info.value, OperationTimeoutError)


def test_timeout_runs_operation_on_executor(executor: ThreadPoolExecutor) -> None:
    def op() -> str:
        return threading.current_thread().name

    name = P.timeout(5, executor=executor).invoke(op)()
    assert name.startswith("test-worker")


@pytest.mark.slow
def test_timeout_does_not_cancel_late_work(executor: ThreadPoolExecutor) -> None:
    finished = threading.Event()

    def op() -> int:
        time.sleep(TIMEOUT)
        finished.set()
        return 1

    with pytest.raises(OperationTimeoutError):
        P.timeout(TIMEOUT / 4, executor=executor).invoke(op)()

    assert finished.wait(5)


@pytest.mark.slow
def test_retry_outside_timeout_gives_each_attempt_a_deadline(executor: ThreadPoolExecutor) -> None:
    attempts = Calls()

    def op() -> int:
        attempts.record(None)
        time.sleep(TIMEOUT)
        return 1

    with pytest.raises(OperationTimeoutError):
        P.retry(2).compose(P.timeout(TIMEOUT / 4, executor=executor)).invoke(op)()
    assert attempts.count == 3


def test_multiple_composition_publishes_once(executor: ThreadPoolExecutor) -> None:
    published = Calls()

    with pytest.raises(Boom, match="attempt 11"):
        (
            P.publish_error(published.record)
            .compose(P.retry(10))
            .compose(P.timeout(10, executor=executor))
            .invoke(Calls())()
        )
    assert published.count == 1


def test_multiple_composition_publishes_per_attempt(executor: ThreadPoolExecutor) -> None:
    published = Calls()

    with pytest.raises(Boom, match="attempt 11"):
        (
            P.retry(10)
            .compose(P.publish_error(published.record))
            .compose(P.timeout(10, executor=executor))
            .invoke(Calls())()
        )
    assert published.count == 11


@pytest.mark.slow
def test_timeout_from_another_thread_with_retry_and_noop(executor: ThreadPoolExecutor) -> None:
    def op() -> int:
        time.sleep(TIMEOUT * 2)
        raise Boom("late")

    composed = P.timeout(TIMEOUT, executor=executor).compose(P.retry(2)).compose(P.noop())
    outcome: list[BaseException] = []

    with ThreadPoolExecutor(max_workers=1) as caller:
        start = time.monotonic()
        future = caller.submit(composed.invoke(op))
        submitted_in = time.monotonic() - start
        outcome.append(future.exception(timeout=5))

    assert submitted_in < 0.1
    assert isinstance(outcome[0], OperationTimeoutError)


def test_nested_timeout_on_same_executor_is_rejected(executor: ThreadPoolExecutor) -> None:
    inner = P.timeout(5, executor=executor)
    outer = P.timeout(5, executor=executor)

    with pytest.raises(ContractError):
        outer.compose(inner).invoke(lambda: 1)()


def test_nested_timeout_on_separate_executors_is_allowed(executor: ThreadPoolExecutor) -> None:
    with ThreadPoolExecutor(max_workers=1) as other:
        composed = P.timeout(5, executor=executor).compose(P.timeout(5, executor=other))
        assert composed.invoke(lambda: 1)() == 1


def test_timeout_validates_duration(executor: ThreadPoolExecutor) -> None:
    with pytest.raises(ContractError):
        P.timeout(-1, executor=executor)
    with pytest.raises(ContractError):
        P.timeout(1, duration=timedelta(seconds=1), executor=executor)
    with pytest.raises(ContractError):
        P.timeout(executor=executor)
