from __future__ import annotations

from datetime import timedelta

import pytest

from composable import ComposableError, ContractError, OperationTimeoutError, policy as P
from composable._errors import to_duration

pytestmark = pytest.mark.unit


def test_timeout_error_carries_duration() -> None:
    err = OperationTimeoutError(timedelta(milliseconds=1500))

    assert err.duration == timedelta(seconds=1.5)
    assert str(err) == "Timed out after 1.5s"
    assert err.hint is None


def test_hierarchy() -> None:
    """Library errors are catchable by their builtin counterparts."""
    assert isinstance(OperationTimeoutError(timedelta(0)), TimeoutError)
    assert isinstance(OperationTimeoutError(timedelta(0)), ComposableError)
    assert isinstance(ContractError("bad"), ValueError)
    assert isinstance(ContractError("bad"), ComposableError)


def test_contract_error_keeps_hint() -> None:
    err = ContractError("bad count", hint="use 0 or more")
    assert err.message == "bad count"
    assert err.hint == "use 0 or more"


@pytest.mark.parametrize("seconds", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_durations_are_contract_errors(seconds: float) -> None:
    with pytest.raises(ContractError):
        to_duration(seconds, None, what="timeout")
    with pytest.raises(ContractError):
        P.retry_with_delay(1, seconds)
