"""
composable — layered retry, timeout, catch and publish around plain callables.

    from composable import policy as P   # Decorators
    from composable import lift as L     # Result / async bridges
    from composable.config import Policy # Declarative configuration

    load = (
        P.publish_error(report)
        .compose(P.retry(3))
        .compose(P.timeout(seconds=2, executor=pool))
        .invoke(read_config)
    )
"""

import logging

from composable import policy
from composable import lift
from composable import config
from composable._composable import Composable, compose_all
from composable._errors import ComposableError, ContractError, OperationTimeoutError
from composable._types import (
    Operation,
    CountedOperation,
    OperationTransform,
    AsyncCallback,
    AsyncOperation,
    Result,
    Ok,
    Error,
)
from composable.policy import sync

# Stay silent unless the application configures logging.
logging.getLogger("composable").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = (
    "policy",
    "lift",
    "config",
    "Composable",
    "compose_all",
    "sync",
    "ComposableError",
    "ContractError",
    "OperationTimeoutError",
    "Operation",
    "CountedOperation",
    "OperationTransform",
    "AsyncCallback",
    "AsyncOperation",
    "Result",
    "Ok",
    "Error",
)
