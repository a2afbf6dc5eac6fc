"""resultpattern: success/failure outcomes with fault-capturing combinators.

Public API:
    - Success / Failure: the two cases of ``Result``
    - success() / failure(): factories for the two cases
    - map_result(): transform a success, propagate a failure
    - match_result(): fold either case into a new success
    - Config / resolve_config(): fault-logging settings

Example:
    outcome = success("Test,20,test@gmail.com").map(parse_person)
    if outcome.succeeded:
        print(outcome.value.name)
    else:
        print(outcome.error)
"""

from __future__ import annotations

import logging

from resultpattern.combinators import map_result, match_result
from resultpattern.config import Config, resolve_config
from resultpattern.errors import (
    ConfigurationError,
    InvalidArgumentError,
    ResultPatternError,
)
from resultpattern.result import (
    Failure,
    Result,
    Success,
    explain_invalid_result,
    failure,
    is_result,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultpattern")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultpattern").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "InvalidArgumentError",
    "Result",
    "ResultPatternError",
    "Success",
    "explain_invalid_result",
    "failure",
    "is_result",
    "map_result",
    "match_result",
    "resolve_config",
    "success",
]
